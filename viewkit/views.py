"""
module: Views
title: class based views
description: resolves a request's http method to the view method of the same name
examples: @(file):test_views.py
exposes:
    - HTTP_METHOD_NAMES: every method name a view may ever handle
    - View: synchronous dispatch, one fresh instance per request
    - AsyncView: awaits coroutine handlers, runs plain ones in a worker thread
"""
import typing

from viewkit._utils import get_logger, is_async_callable
from viewkit.concurrency import run_in_threadpool
from viewkit.exceptions import MethodNotAllowed
from viewkit.types import AsyncViewFunc, Handler, Renderer, Request, ViewFunc

__all__ = ("HTTP_METHOD_NAMES", "View", "AsyncView")

HTTP_METHOD_NAMES = frozenset(
    ("get", "post", "put", "delete", "head", "options", "trace")
)

logger = get_logger(__name__)


class View(object):
    """Http view

    Attrs:
        http_method_names: method names this view accepts, narrowed by subclasses
        app: application object injected on construction, `None` if not given
    """

    http_method_names: typing.Sequence[str] = (
        "get",
        "post",
        "put",
        "delete",
        "head",
        "options",
        "trace",
    )
    app: typing.Optional[Renderer] = None

    def __init__(
        self, *, app: typing.Optional[Renderer] = None, **initkwargs: typing.Any
    ) -> None:
        """View initialization
        Args:
            app: application object, e.g. a `Jinja2Template` for template views
            initkwargs: attributes overriding the class attributes of the same name

        Returns:
            None

        Examples:
            class HomeView(View):
                greeting = "Hello"

                def get(self, request):
                    return f"{self.greeting}, all of you"

            HomeView(greeting="Hi").dispatch(request)
        """
        if app is not None:
            self.app = app
        for key, value in initkwargs.items():
            setattr(self, key, value)

    @classmethod
    def as_view(cls, *args: typing.Any, **initkwargs: typing.Any) -> ViewFunc:
        """Build a route handler for this view class
        Args:
            args: positional arguments for the view constructor
            initkwargs: keyword arguments for the view constructor

        Returns:
            view(request, app=None), building a new view instance per call

        Raises:
            TypeError: a keyword shadows a handler or is not a class attribute,
                or positional arguments are given to the default constructor

        Examples:
            router.add("/", HomeView.as_view(greeting="Hi"))
        """
        cls._check_arguments(args, initkwargs)

        def view(request: Request, app: typing.Optional[Renderer] = None) -> typing.Any:
            self = cls(*args, **cls._with_app(initkwargs, app))
            return self.dispatch(request)

        return cls._decorate(view, args, initkwargs)

    @classmethod
    def _check_arguments(
        cls,
        args: typing.Tuple[typing.Any, ...],
        initkwargs: typing.Mapping[str, typing.Any],
    ) -> None:
        if args and cls.__init__ is View.__init__:
            raise TypeError(
                f"{cls.__name__}.as_view() takes no positional arguments,"
                " define __init__ to accept them"
            )
        for key in initkwargs:
            if key in HTTP_METHOD_NAMES:
                raise TypeError(
                    f"The method name `{key}` is not accepted as a keyword argument"
                    f" to {cls.__name__}.as_view()"
                )
            # subclasses with their own constructor validate their own arguments
            if cls.__init__ is View.__init__ and not hasattr(cls, key):
                raise TypeError(
                    f"{cls.__name__}.as_view() received an invalid keyword `{key}`,"
                    " only class attributes are accepted"
                )

    @staticmethod
    def _with_app(
        initkwargs: typing.Mapping[str, typing.Any], app: typing.Optional[Renderer]
    ) -> typing.Dict[str, typing.Any]:
        kwargs = dict(initkwargs)
        if app is not None:
            kwargs["app"] = app
        return kwargs

    @classmethod
    def _decorate(
        cls,
        view: typing.Callable,
        args: typing.Tuple[typing.Any, ...],
        initkwargs: typing.Mapping[str, typing.Any],
    ) -> typing.Any:
        view.view_class = cls  # type: ignore[attr-defined]
        view.view_args = args  # type: ignore[attr-defined]
        view.view_kwargs = initkwargs  # type: ignore[attr-defined]
        view.__name__ = cls.__name__
        view.__qualname__ = cls.__qualname__
        view.__doc__ = cls.__doc__
        view.__module__ = cls.__module__
        return view

    def _has_handler(self, name: str) -> bool:
        return callable(getattr(self, name, None))

    def _accepted_names(self) -> typing.List[str]:
        return [
            name.lower()
            for name in self.http_method_names
            if name.lower() in HTTP_METHOD_NAMES
        ]

    def _handler_name(self, method: str) -> typing.Optional[str]:
        handler_name = (
            "get" if method == "head" and not self._has_handler("head") else method
        )
        if handler_name in self._accepted_names() and self._has_handler(handler_name):
            return handler_name
        return None

    def allowed_methods(self) -> typing.List[str]:
        names = self._accepted_names()
        # head is served by get even when narrowed out of http_method_names
        if "head" not in names:
            names.append("head")
        return [
            name.upper() for name in names if self._handler_name(name) is not None
        ]

    def get_handler(self, request: Request) -> Handler:
        method = request.method.lower()
        handler_name = self._handler_name(method)
        if handler_name is None:
            self.method_not_allowed(method)

        logger.debug(
            f"{type(self).__name__}: {request.method} handled by `{handler_name}`"
        )
        return getattr(self, handler_name)

    def dispatch(self, request: Request) -> typing.Any:
        handler = self.get_handler(request)
        return handler(request)

    def method_not_allowed(self, method: str) -> typing.NoReturn:
        logger.warning(f"{type(self).__name__}: method `{method}` not allowed")
        raise MethodNotAllowed(method, allowed=self.allowed_methods())


class AsyncView(View):
    """Http view for asynchronous frameworks

    Handlers may be coroutine functions or plain functions, the latter run in
    a worker thread so they do not block the event loop.

    Examples:
        class HomeView(AsyncView):
            async def get(self, request):
                ...

            def post(self, request):
                ...
    """

    @classmethod
    def as_view(cls, *args: typing.Any, **initkwargs: typing.Any) -> AsyncViewFunc:
        cls._check_arguments(args, initkwargs)

        async def view(
            request: Request, app: typing.Optional[Renderer] = None
        ) -> typing.Any:
            self = cls(*args, **cls._with_app(initkwargs, app))
            return await self.dispatch(request)

        return cls._decorate(view, args, initkwargs)

    async def dispatch(self, request: Request) -> typing.Any:  # type: ignore[override]
        handler = self.get_handler(request)
        if is_async_callable(handler):
            return await handler(request)

        return await run_in_threadpool(handler, request)
