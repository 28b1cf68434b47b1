"""
View Responses
Turns rendered views into Sanic HTTP responses
"""
from typing import Any, Dict, Mapping, Optional

from sanic.response import HTTPResponse, html

from viewkit.view_builder import ViewBuilder


def view_response(
    view_id: str,
    context: Optional[Mapping[str, Any]] = None,
    type: Any = None,
    status: int = 200,
    headers: Optional[Dict[str, str]] = None,
    builder: Optional[ViewBuilder] = None
) -> HTTPResponse:
    """
    Render a view into an HTML response

    Args:
        view_id: View identifier to render
        context: Context to render the view with
        type: Type of view to create
        status: HTTP status code
        headers: Additional response headers
        builder: Builder to resolve the view with (defaults to the Views facade)

    Returns:
        Sanic HTTPResponse

    Example:
        @app.get('/')
        async def home(request):
            return view_response('pages/home', {'title': 'Home'})
    """
    if builder is None:
        from viewkit.views import Views
        builder = Views.get_view_builder()

    content = builder.create(view_id, type).render(context)

    return html(content, status=status, headers=headers)
