"""
module: Config
title: settings
description: settings lookup for viewkit, from the environment then an optional `.env` file
exposes:
    - Config: lookup with `cast` and `default`, keys optionally prefixed
settings:
    - DEBUG: log at debug level when true
    - VIEWKIT_TEMPLATE_DIR: template directory for `Jinja2Template.from_config`
"""
import os
import typing


class Undefined(object):
    pass


_BOOLS = {"true": True, "1": True, "false": False, "0": False}


class Config(object):
    def __init__(
        self,
        env_file: typing.Optional[typing.Union[str, os.PathLike]] = None,
        environ: typing.Mapping[str, str] = os.environ,
        env_prefix: str = "",
    ) -> None:
        self.environ = environ
        self.env_prefix = env_prefix
        self.file_values: typing.Dict[str, str] = {}
        if env_file is not None and os.path.isfile(env_file):
            self.file_values = self._load_from_env(env_file)

    def _load_from_env(
        self, env_file: typing.Union[str, os.PathLike]
    ) -> typing.Dict[str, str]:
        file_values: typing.Dict[str, str] = {}
        with open(env_file) as ifile:
            for line in ifile:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, value = line.split("=", 1)
                file_values[key.strip()] = value.strip().strip("\"'")
        return file_values

    def get(
        self,
        key: str,
        cast: typing.Optional[typing.Callable] = None,
        default: typing.Any = Undefined,
    ) -> typing.Any:
        key = self.env_prefix + key
        if key in self.environ:
            value = self.environ[key]
        elif key in self.file_values:
            value = self.file_values[key]
        elif default is not Undefined:
            value = default
        else:
            raise KeyError(f"Config '{key}' is missing, and has no default")

        return self._cast(key, value, cast)

    def _cast(
        self, key: str, value: typing.Any, cast: typing.Optional[typing.Callable]
    ) -> typing.Any:
        if cast is None or value is None:
            return value

        if cast is bool and isinstance(value, str):
            if value.lower() not in _BOOLS:
                raise ValueError(
                    f'Config "{key}" has value "{value}", not a valid bool'
                )
            return _BOOLS[value.lower()]

        try:
            return cast(value)
        except (TypeError, ValueError):
            raise ValueError(
                f'Config "{key}" has value "{value}", not a valid {cast.__name__}'
            )

    __call__ = get
