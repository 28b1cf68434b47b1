"""
URI Helper
String utilities for matching template URIs
"""
import posixpath


class URIHelper:
    """
    Pure helpers for template URIs

    Example:
        URIHelper.has_extension('views/home.html', '.html')  # True
        URIHelper.get_filename('views/home.html')            # 'home.html'
    """

    @staticmethod
    def has_extension(uri: str, extension: str) -> bool:
        """
        Check whether a given URI ends with a specific extension

        Comparison is exact and case-sensitive. The empty extension always
        matches; an extension longer than the URI never does.
        """
        if len(extension) > len(uri):
            return False
        if not extension:
            return True
        return uri[-len(extension):] == extension

    @staticmethod
    def get_filename(uri: str) -> str:
        """
        Get the filename of an URI, without its path

        A trailing separator is ignored ('a/b/' gives 'b'), a bare separator
        gives ''.
        """
        uri = uri.rstrip('/')
        if not uri:
            return ''
        return posixpath.basename(uri)


has_extension = URIHelper.has_extension
get_filename = URIHelper.get_filename
