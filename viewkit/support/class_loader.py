"""
Class Loader
Dynamic class loading utility for turning configured names into classes and factories
"""
import threading
from typing import Callable, Dict, Type, Union


class ClassLoader:
    """
    Utility for resolving classes and factories from string names

    Names are looked up in a registry first, then imported as dotted paths.

    Example:
        # Load a class from its dotted path
        cls = ClassLoader.load('viewkit.view.BaseView')

        # Register a short name for a factory
        ClassLoader.register('json', JsonView)
        factory = ClassLoader.resolve('json')

        # Create instance
        instance = factory(uri, engine)
    """

    _lock = threading.Lock()
    _registry: Dict[str, Callable] = {}

    @classmethod
    def register(cls, name: str, factory: Callable) -> None:
        """
        Register a factory (usually a class) under a short name

        Args:
            name: Name to register the factory under
            factory: Class or callable producing instances
        """
        if not callable(factory):
            raise TypeError(f"Factory registered as '{name}' is not callable.")
        with cls._lock:
            cls._registry[name] = factory

    @classmethod
    def unregister(cls, name: str) -> None:
        """Remove a registered name (no-op if unknown)"""
        with cls._lock:
            cls._registry.pop(name, None)

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check whether a short name is registered"""
        return name in cls._registry

    @classmethod
    def clear_registry(cls) -> None:
        """Remove all registered names"""
        with cls._lock:
            cls._registry.clear()

    @classmethod
    def resolve(cls, name: str) -> Union[Callable, Type]:
        """
        Resolve a name to a class or factory

        Args:
            name: Registered short name or full dotted path

        Returns:
            The class or factory (not instantiated)

        Raises:
            ImportError: If the name is neither registered nor importable
            AttributeError: If the module has no such attribute
        """
        factory = cls._registry.get(name)
        if factory is not None:
            return factory
        return cls.load(name)

    @staticmethod
    def load(class_path: str) -> Type:
        """
        Load a class from a dotted path string

        Args:
            class_path: Full dotted path to class (e.g., 'viewkit.view.BaseView')

        Returns:
            The class object (not instantiated)

        Raises:
            ImportError: If module cannot be imported
            AttributeError: If class doesn't exist in module

        Example:
            >>> cls = ClassLoader.load('viewkit.view.BaseView')
            >>> view = cls(uri, engine)
        """
        if '.' not in class_path:
            raise ImportError(f"'{class_path}' is not a dotted path.")

        # Split module path and class name
        module_path, class_name = class_path.rsplit('.', 1)
        if not module_path or not class_name or module_path.startswith('.'):
            raise ImportError(f"'{class_path}' is not an absolute dotted path.")

        # Import the module
        module = __import__(module_path, fromlist=[class_name])

        # Get the class from module
        return getattr(module, class_name)
