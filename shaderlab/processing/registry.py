"""
Filter registry.

Each filter is described by a FilterDefinition: an identifier, a display
name, the categories it belongs to, its inputs with attribute metadata, and
an apply function that does the pixel work through OpenImageIO. Live filter
objects are created from definitions on demand and configured by key,
so callers only ever see names and attribute dictionaries.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional

from ..utils.logging import get_logger

logger = get_logger("registry")

# Attribute keys
ATTR_DISPLAY_NAME = "display_name"
ATTR_CATEGORIES = "categories"
ATTR_DEFAULT = "default"
ATTR_MIN = "min"
ATTR_MAX = "max"
ATTR_DESCRIPTION = "description"

# Every filter takes its source image under this key
INPUT_IMAGE_KEY = "image"

# Categories
CATEGORY_BLUR = "blur"
CATEGORY_COLOR_EFFECT = "color_effect"
CATEGORY_COLOR_ADJUSTMENT = "color_adjustment"
CATEGORY_SHARPEN = "sharpen"
CATEGORY_STYLIZE = "stylize"
CATEGORY_GEOMETRY = "geometry"


@dataclass
class FilterInput:
    """One configurable filter input."""
    key: str
    display_name: str
    default: Any
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    description: str = ""

    def attributes(self) -> Dict[str, Any]:
        """Attribute dict for this input; absent bounds are omitted."""
        attrs: Dict[str, Any] = {
            ATTR_DISPLAY_NAME: self.display_name,
            ATTR_DEFAULT: self.default,
        }
        if self.minimum is not None:
            attrs[ATTR_MIN] = self.minimum
        if self.maximum is not None:
            attrs[ATTR_MAX] = self.maximum
        if self.description:
            attrs[ATTR_DESCRIPTION] = self.description
        return attrs


ApplyFunc = Callable[[Any, Dict[str, Any]], Any]


@dataclass
class FilterDefinition:
    """Static description of a filter."""
    name: str
    display_name: str
    categories: List[str]
    apply: ApplyFunc
    inputs: List[FilterInput] = field(default_factory=list)


class ImageFilter:
    """A configurable filter instance created from a FilterDefinition."""

    def __init__(self, definition: FilterDefinition):
        self.definition = definition
        self._values: Dict[str, Any] = {INPUT_IMAGE_KEY: None}
        for inp in definition.inputs:
            self._values[inp.key] = inp.default

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def input_keys(self) -> List[str]:
        """Input keys, image first."""
        return [INPUT_IMAGE_KEY] + [inp.key for inp in self.definition.inputs]

    @property
    def attributes(self) -> Dict[str, Any]:
        """Filter attributes: display name, categories, and one dict per input."""
        attrs: Dict[str, Any] = {
            ATTR_DISPLAY_NAME: self.definition.display_name,
            ATTR_CATEGORIES: list(self.definition.categories),
        }
        for inp in self.definition.inputs:
            attrs[inp.key] = inp.attributes()
        return attrs

    def set_value(self, value: Any, key: str) -> None:
        """Set an input by key. Unknown keys are ignored."""
        if key not in self._values:
            logger.debug("%s: ignoring unknown input %r", self.name, key)
            return
        self._values[key] = value

    def value(self, key: str) -> Any:
        return self._values.get(key)

    @property
    def output_image(self) -> Optional[Any]:
        """
        Run the filter on the current input image.

        Returns None when no image is set or the filter fails.
        """
        image = self._values[INPUT_IMAGE_KEY]
        if image is None:
            return None

        params = {k: v for k, v in self._values.items() if k != INPUT_IMAGE_KEY}
        try:
            result = self.definition.apply(image, params)
        except Exception as e:
            logger.warning("Failed to apply filter %s: %s", self.name, e)
            return None

        if result is None or getattr(result, "has_error", False):
            logger.warning("Filter %s produced no output", self.name)
            return None
        return result


class FilterRegistry:
    """Enumerates and instantiates filters by name and category."""

    def __init__(self, definitions: Iterable[FilterDefinition] = ()):
        self._definitions: Dict[str, FilterDefinition] = {}
        for definition in definitions:
            self.register(definition)

    def register(self, definition: FilterDefinition) -> None:
        """Add a filter definition. Names must be unique."""
        if definition.name in self._definitions:
            raise ValueError(f"Filter {definition.name!r} is already registered")
        self._definitions[definition.name] = definition

    def filter_names(self, category: str) -> List[str]:
        """Identifiers of all filters in a category."""
        return [
            name for name, definition in self._definitions.items()
            if category in definition.categories
        ]

    def create_filter(self, name: str) -> Optional[ImageFilter]:
        """Create a filter instance by name. Returns None if not found."""
        definition = self._definitions.get(name)
        if definition is None:
            return None
        return ImageFilter(definition)

    def categories(self) -> List[str]:
        """All categories in first-seen order."""
        result: List[str] = []
        for definition in self._definitions.values():
            for category in definition.categories:
                if category not in result:
                    result.append(category)
        return result


_DEFAULT_REGISTRY: Optional[FilterRegistry] = None


def default_registry() -> FilterRegistry:
    """Registry of the builtin OpenImageIO filters, created on first use."""
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        from .builtin_filters import BUILTIN_FILTERS
        _DEFAULT_REGISTRY = FilterRegistry(BUILTIN_FILTERS)
    return _DEFAULT_REGISTRY
