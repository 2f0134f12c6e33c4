"""
module: Templating
title: template views
description: views whose default `get` renders a template named after the view class
examples: @(file):test_templating.py
exposes:
    - TemplateResponseMixin: template name resolution, context data and rendering
    - TemplateView: View answering `get` with the rendered template
    - Jinja2Template: jinja2 backed renderer usable as the view `app`
"""
import os
import typing

import jinja2

from viewkit._utils import get_logger
from viewkit.config import Config
from viewkit.exceptions import ImproperlyConfigured
from viewkit.types import Context, ContextProcessor, Request
from viewkit.views import View

__all__ = ("TemplateResponseMixin", "TemplateView", "Jinja2Template")

logger = get_logger(__name__)


class TemplateResponseMixin(object):
    """Template name resolution and rendering for views

    Attrs:
        template_name: template to render, derived from the class name when `None`
        template_suffix: appended to the class name to build the default name
    """

    template_name: typing.Optional[str] = None
    template_suffix: str = ".twig"
    app: typing.Any = None

    def get_template_name(self) -> str:
        """Template name for this view
        Args:
            None

        Returns:
            `template_name` if set, else the class name plus `template_suffix`

        Examples:
            class HomeView(TemplateView):
                pass

            HomeView().get_template_name() == "HomeView.twig"
        """
        if self.template_name is not None:
            return self.template_name

        return type(self).__name__ + self.template_suffix

    def get_context_data(self, request: Request, **kwargs: typing.Any) -> Context:
        return dict(kwargs)

    def render_to_response(self, context: Context) -> typing.Any:
        if self.app is None:
            raise ImproperlyConfigured(
                f"{type(self).__name__} has no `app` to render templates with,"
                " pass one to as_view() or to the view constructor"
            )

        name = self.get_template_name()
        logger.debug(f"{type(self).__name__}: render template `{name}`")
        return self.app.render(name, context)


class TemplateView(TemplateResponseMixin, View):
    """Render a template on `get`

    Examples:
        class HomeView(TemplateView):
            def get_context_data(self, request, **kwargs):
                context = super().get_context_data(request, **kwargs)
                context["user"] = request.user
                return context

        view = HomeView.as_view(app=Jinja2Template(directory="templates"))
    """

    def get(self, request: Request) -> typing.Any:
        return self.render_to_response(self.get_context_data(request))


class Jinja2Template(object):
    def __init__(
        self,
        directory: typing.Optional[
            typing.Union[
                str, os.PathLike, typing.Sequence[typing.Union[str, os.PathLike]]
            ]
        ] = None,
        *,
        context_processors: typing.Optional[typing.List[ContextProcessor]] = None,
        env: typing.Optional[jinja2.Environment] = None,
        **env_options: typing.Any,
    ) -> None:
        if directory is None and env is None:
            raise ImproperlyConfigured(
                "either `directory` or `env` argument must be passed"
            )

        self.context_processors = context_processors or []

        if env is not None:
            self.env = env
        else:
            self.env = self.load_env(directory, **env_options)  # type: ignore[arg-type]

    @classmethod
    def from_config(
        cls, config: typing.Optional[Config] = None, **kwargs: typing.Any
    ) -> "Jinja2Template":
        config = Config() if config is None else config
        return cls(directory=config("VIEWKIT_TEMPLATE_DIR"), **kwargs)

    def load_env(
        self,
        directory: typing.Union[
            str, os.PathLike, typing.Sequence[typing.Union[str, os.PathLike]]
        ],
        **env_options: typing.Any,
    ) -> jinja2.Environment:
        directories = (
            [directory] if isinstance(directory, (str, os.PathLike)) else directory
        )
        for path in directories:
            if not os.path.isdir(path):
                raise ImproperlyConfigured(
                    f"template directory `{path}` is not a directory"
                )

        loader = jinja2.FileSystemLoader([str(path) for path in directories])
        env_options.setdefault("loader", loader)
        env_options.setdefault("autoescape", True)
        return jinja2.Environment(**env_options)  # nosec

    def get_template(self, name: str) -> jinja2.Template:
        return self.env.get_template(name)

    def render(self, name: str, context: typing.Optional[Context] = None) -> str:
        context = dict(context or {})
        for ctxt_proc in self.context_processors:
            context.update(ctxt_proc(context))

        return self.get_template(name).render(context)
