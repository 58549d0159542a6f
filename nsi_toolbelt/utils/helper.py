from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nsi_toolbelt.contexts.base import BaseContext


def generate_or_use_handle(ctx: "BaseContext", handle: str | None, prefix: str | None = None) -> str:
    """Return `handle` unchanged if given, otherwise a fresh one from the context.

    Args:
        ctx: Context whose handle allocator is used.
        handle: Caller-supplied handle. Uniqueness is the caller's responsibility.
        prefix: Category label the generated handle is namespaced with.
    Returns:
        The resolved handle.
    """
    if handle is not None:
        return handle
    return ctx.generate_handle(prefix)
