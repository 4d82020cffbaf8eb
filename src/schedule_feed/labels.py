"""Label dictionaries and first-match fallback resolution.

Precedence chains (pack schedule -> day rules -> empty, dataset label ->
built-in label -> raw code) are written as ordered lookups passed to
first_match so the order reads top to bottom.
"""

from typing import Any, Callable, Mapping


def first_match(*lookups: Callable[[], Any], default: Any = None) -> Any:
    """Return the first lookup result that is not None.

    Lookups are called lazily, in order. An empty list or string counts as a
    match; only None falls through.
    """
    for lookup in lookups:
        value = lookup()
        if value is not None:
            return value
    return default


def merge_labels(
    defaults: Mapping[str, str], overrides: Mapping[str, Any] | None
) -> dict[str, str]:
    """Built-in labels with dataset labels layered on top (dataset wins)."""
    merged = dict(defaults)
    if isinstance(overrides, Mapping):
        merged.update({str(k): str(v) for k, v in overrides.items()})
    return merged


class LabelSet:
    """Clothing and pack labels for one build, defaults merged with meta."""

    def __init__(
        self,
        clothing_defaults: Mapping[str, str],
        pack_defaults: Mapping[str, str],
        meta: Mapping[str, Any] | None = None,
    ) -> None:
        meta = meta if isinstance(meta, Mapping) else {}
        self.clothing = merge_labels(clothing_defaults, meta.get("clothing_labels"))
        self.pack = merge_labels(pack_defaults, meta.get("pack_labels"))

    def clothing_label(self, code: str | None) -> str:
        if code is None:
            return ""
        return self.clothing.get(code) or code

    def pack_label(self, code: str) -> str:
        return self.pack.get(code) or code

    def ensure_pack_label(self, code: str, label: str) -> None:
        if not self.pack.get(code):
            self.pack[code] = label
