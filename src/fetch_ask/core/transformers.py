"""
Named transformer pipeline for fetch_ask.
"""
import inspect
import logging
from typing import Any, Dict, List, Optional, Union

from ..errors import TransformError
from ..types import HookKind, Transformer

logger = logging.getLogger("fetch_ask.transformers")

# Option keys that register a one-shot transformer, e.g. {"url_transformer": fn}
TRANSFORMER_OPTION_KEYS = {
    f"{kind.value}_transformer": kind for kind in HookKind
}


def to_hook_kind(kind: Union[HookKind, str]) -> HookKind:
    """Normalize a hook name to HookKind."""
    try:
        return HookKind(kind)
    except ValueError as e:
        valid = sorted(k.value for k in HookKind)
        raise ValueError(f"Invalid hook kind: {kind!r}. Must be one of: {valid}") from e


class TransformerRegistry:
    """
    Ordered transformer lists, one per HookKind.

    Transformers run in registration order, each receiving the previous
    one's output. Copies are independent: `copy()` duplicates the lists,
    never the functions.
    """

    def __init__(self, hooks: Optional[Dict[HookKind, List[Transformer]]] = None):
        self._hooks: Dict[HookKind, List[Transformer]] = {kind: [] for kind in HookKind}
        if hooks:
            for kind, fns in hooks.items():
                self._hooks[to_hook_kind(kind)].extend(fns)

    def add(self, kind: Union[HookKind, str], fn: Transformer) -> None:
        """Register a transformer at the end of the stage's list."""
        if not callable(fn):
            raise TypeError(f"Transformer for {kind!r} must be callable")
        self._hooks[to_hook_kind(kind)].append(fn)

    def remove(self, kind: Union[HookKind, str], fn: Transformer) -> None:
        """Remove a transformer by identity. No-op when absent."""
        fns = self._hooks[to_hook_kind(kind)]
        for index, existing in enumerate(fns):
            if existing is fn:
                del fns[index]
                return

    def get(self, kind: Union[HookKind, str]) -> List[Transformer]:
        """Return a copy of the stage's transformer list."""
        return list(self._hooks[to_hook_kind(kind)])

    def copy(self) -> "TransformerRegistry":
        return TransformerRegistry(self._hooks)

    def extend(self, other: "TransformerRegistry") -> None:
        """Append every transformer of `other` after the receiver's own."""
        for kind in HookKind:
            self._hooks[kind].extend(other._hooks[kind])

    def apply(self, kind: Union[HookKind, str], value: Any) -> Any:
        """Run a synchronous stage (url, headers, body)."""
        kind = to_hook_kind(kind)
        for fn in self._hooks[kind]:
            try:
                value = fn(value)
            except TransformError:
                raise
            except Exception as e:
                logger.debug(f"apply: {kind.value} transformer {fn!r} raised {e!r}")
                raise TransformError(str(e), hook=kind.value) from e
        return value

    async def apply_async(self, kind: Union[HookKind, str], value: Any) -> Any:
        """Run a stage whose transformers may return awaitables."""
        kind = to_hook_kind(kind)
        for fn in self._hooks[kind]:
            try:
                value = fn(value)
                if inspect.isawaitable(value):
                    value = await value
            except TransformError:
                raise
            except Exception as e:
                logger.debug(f"apply_async: {kind.value} transformer {fn!r} raised {e!r}")
                raise TransformError(str(e), hook=kind.value) from e
        return value

    async def apply_error(self, error: BaseException) -> BaseException:
        """
        Run the error stage.

        Each transformer receives the current error and returns the error to
        raise; returning None keeps the current one. Exceptions raised by an
        error transformer propagate as-is.
        """
        for fn in self._hooks[HookKind.ERROR]:
            result = fn(error)
            if inspect.isawaitable(result):
                result = await result
            if result is None:
                continue
            if not isinstance(result, BaseException):
                raise TransformError(
                    f"Error transformer returned {type(result).__name__}, expected an exception",
                    hook=HookKind.ERROR.value,
                )
            error = result
        return error

    def __len__(self) -> int:
        return sum(len(fns) for fns in self._hooks.values())

    def __repr__(self) -> str:
        counts = {kind.value: len(fns) for kind, fns in self._hooks.items() if fns}
        return f"TransformerRegistry({counts})"
