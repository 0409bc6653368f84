"""Method registry.

Holds the ordered list of registered methods, each a name, a handler and an
optional parameter schema, together with the context shared by every handler.

Method names are not required to be unique. Lookup returns the first route
registered under a name, so a later registration with the same name is never
reached by dispatch.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

from loguru import logger

from methodrouter.config.schema import RouterSettings
from methodrouter.router.context_models import RequestParams
from methodrouter.validation.json_schema import to_json_schema
from methodrouter.validation.schema import SchemaValidator

C = TypeVar("C")
F = TypeVar("F", bound=Callable[..., Any])

Handler = Callable[[RequestParams[Any, Any]], Any]


@dataclass(frozen=True, slots=True)
class Route:
    """A registered method. Immutable once added to a Router."""

    method: str
    callback: Handler
    schema: Any = None
    strict: bool = False
    validator: SchemaValidator | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.schema is not None:
            object.__setattr__(self, "validator", SchemaValidator(self.schema, strict=self.strict or None))


@dataclass(frozen=True, slots=True)
class RouteJSONSchema:
    """Catalog entry: method name plus its parameter descriptor, if any."""

    method: str
    schema: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        if self.schema is None:
            return {"method": self.method}
        return {"method": self.method, "schema": self.schema}


class Router(Generic[C]):
    """Ordered, append-only registry of routes plus a shared, fixed context."""

    def __init__(self, context: C, *, settings: RouterSettings | None = None) -> None:
        self._context = context
        self._routes: list[Route] = []
        self.settings = settings or RouterSettings()

    @property
    def context(self) -> C:
        return self._context

    @property
    def routes(self) -> tuple[Route, ...]:
        """All routes in registration order."""
        return tuple(self._routes)

    def add_route(self, method: str, callback: Handler, schema: Any = None, *, strict: bool = False) -> None:
        """Register ``callback`` under ``method``.

        Args:
            method: Method name, matched exactly and case-sensitively.
            callback: Called with a RequestParams; may be sync or async.
            schema: Optional pydantic model or type annotation for ``params``.
            strict: Validate ``params`` without type coercion, so ``"5"`` is not
                accepted where an int is declared.
        """
        if self.find_route(method) is not None:
            logger.debug("Method {} already registered; the earlier route keeps precedence", method)
        self._routes.append(Route(method=method, callback=callback, schema=schema, strict=strict))

    def route(self, method: str, schema: Any = None, *, strict: bool = False) -> Callable[[F], F]:
        """Decorator form of add_route.

        Usage:
            @router.route("users/get", schema=GetUserParams)
            async def get_user(req: RequestParams[AppContext, GetUserParams]) -> dict:
                ...
        """

        def decorator(func: F) -> F:
            self.add_route(method, func, schema, strict=strict)
            return func

        return decorator

    def find_route(self, method: str) -> Route | None:
        """First route registered under ``method``, or None."""
        for route in self._routes:
            if route.method == method:
                return route
        return None

    def list_methods(self) -> list[str]:
        """Method names in registration order (duplicates kept)."""
        return [route.method for route in self._routes]

    @property
    def json_schema_routes(self) -> list[RouteJSONSchema]:
        """Catalog of all routes; descriptors are rebuilt on every access."""
        return [self._catalog_entry(route) for route in self._routes]

    def _catalog_entry(self, route: Route) -> RouteJSONSchema:
        if route.validator is None:
            return RouteJSONSchema(method=route.method)
        return RouteJSONSchema(
            method=route.method,
            schema=to_json_schema(
                route.validator,
                mode=self.settings.schema_mode,
                include_schema_uri=self.settings.include_schema_uri,
            ),
        )

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"Router(methods={self.list_methods()!r})"
