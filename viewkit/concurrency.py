import functools
import typing

import anyio

from viewkit.types import P, T


async def run_in_threadpool(
    func: typing.Callable[P, T], *args: P.args, **kwargs: P.kwargs
) -> T:
    if kwargs:  # pragma: no cover
        func = functools.partial(func, **kwargs)

    return await anyio.to_thread.run_sync(func, *args)
