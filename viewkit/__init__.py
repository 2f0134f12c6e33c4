__version__ = "0.1.0"
__description__ = "class based views with http method dispatch and template views"

__all__ = [
    "View",
    "AsyncView",
    "HTTP_METHOD_NAMES",
    "TemplateResponseMixin",
    "TemplateView",
    "Jinja2Template",
    "HttpException",
    "MethodNotAllowed",
    "ImproperlyConfigured",
    "Config",
]

from .config import Config
from .exceptions import HttpException, ImproperlyConfigured, MethodNotAllowed
from .templating import Jinja2Template, TemplateResponseMixin, TemplateView
from .views import HTTP_METHOD_NAMES, AsyncView, View
