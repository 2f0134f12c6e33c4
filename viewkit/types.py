import typing

P = typing.ParamSpec("P")
T = typing.TypeVar("T")

Context = typing.Dict[str, typing.Any]


class Request(typing.Protocol):
    method: str


class Renderer(typing.Protocol):
    def render(self, name: str, context: Context) -> typing.Any:
        ...  # pragma: no cover


Handler = typing.Callable[[typing.Any], typing.Any]
ViewFunc = typing.Callable[..., typing.Any]
AsyncViewFunc = typing.Callable[..., typing.Awaitable[typing.Any]]
ContextProcessor = typing.Callable[[Context], Context]
