import html
import http
import typing

__all__ = ("HttpException", "MethodNotAllowed", "ImproperlyConfigured")


class HttpException(Exception):
    def __init__(
        self,
        status_code: int,
        detail: typing.Optional[str] = None,
        headers: typing.Optional[dict] = None,
    ) -> None:
        if detail is None:
            try:
                detail = http.HTTPStatus(status_code).phrase
            except ValueError:
                detail = "unknown http status code"

        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail
        self.headers = headers or {}

    def __repr__(self) -> str:
        klass_name = self.__class__.__name__
        return (
            f"{klass_name}(status_code={self.status_code}" f", detail={self.detail!r})"
        )


class MethodNotAllowed(HttpException):
    """Raised when a view has no handler for the request method

    Attrs:
        method: requested method name, lower-cased and html escaped
        allowed: methods the view does implement, upper-cased
    """

    def __init__(self, method: str, allowed: typing.Iterable[str] = ()) -> None:
        self.method = html.escape(method)
        self.allowed = list(allowed)
        super().__init__(
            status_code=405,
            detail=f"http method {self.method} not allowed",
            headers={"Allow": ", ".join(self.allowed)},
        )


class ImproperlyConfigured(Exception):
    pass
