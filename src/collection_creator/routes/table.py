"""In-process route table for host applications."""

from typing import Any, Callable, Iterable, Iterator

from .base import ParameterDescriptor, RouteDescriptor


class RouteTable:
    """Ordered registry of routes.

    Handlers are registered with the ``route`` decorator::

        routes = RouteTable()

        @routes.route("/users/{id}", methods=["GET"])
        def get_user(id: Annotated[int, Query()]): ...
    """

    def __init__(self, routes: Iterable[RouteDescriptor] = ()):
        self._routes: list[RouteDescriptor] = list(routes)

    def route(self, paths: str | Iterable[str], methods: Iterable[str] = ("GET",), name: str = ""):
        """Decorator registering the wrapped function for the given paths and methods."""

        def decorator(handler: Callable[..., Any]) -> Callable[..., Any]:
            self.add_route(paths, methods, handler=handler, name=name)
            return handler

        return decorator

    def add_route(
        self,
        paths: str | Iterable[str],
        methods: Iterable[str],
        handler: Callable[..., Any] | None = None,
        parameters: list[ParameterDescriptor] | None = None,
        name: str = "",
    ) -> RouteDescriptor:
        if isinstance(paths, str):
            paths = [paths]
        if isinstance(methods, str):
            methods = [methods]
        descriptor = RouteDescriptor(
            patterns=list(paths),
            methods=list(methods),
            handler=handler,
            parameters=parameters,
            name=name,
        )
        self._routes.append(descriptor)
        return descriptor

    def __iter__(self) -> Iterator[RouteDescriptor]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)
