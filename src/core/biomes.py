"""The deployed biome catalog and biome page helpers."""

from collections.abc import Sequence

from src.core.carousel_logic import CarouselModel, Item
from src.core.config import PAGE_URL_TEMPLATE
from src.core.errors import ItemNotFoundError


def _biome(biome_id: str) -> Item:
    return Item(
        id=biome_id,
        label=biome_id.capitalize(),
        target_url=PAGE_URL_TEMPLATE.format(id=biome_id),
    )


DEFAULT_BIOMES: tuple[Item, ...] = tuple(
    _biome(biome_id) for biome_id in ("forest", "mesa", "caldera", "marine", "tundra")
)


def get_biome(item_id: str, items: Sequence[Item] = DEFAULT_BIOMES) -> Item:
    """Look up a biome by id.

    Raises:
        ItemNotFoundError: If no biome has that id.
    """
    for item in items:
        if item.id == item_id:
            return item
    raise ItemNotFoundError(item_id)


def neighbors_for(
    item_id: str, items: Sequence[Item] = DEFAULT_BIOMES
) -> tuple[Item, Item]:
    """Return the (previous, next) biomes linked from a biome page.

    Raises:
        ItemNotFoundError: If no biome has that id.
    """
    model = CarouselModel(items)
    index = model.index_of(item_id)
    if index is None:
        raise ItemNotFoundError(item_id)
    slots = model.roles_for(index)
    return model.items[slots.prev], model.items[slots.next]


def biome_from_title(title: str, items: Sequence[Item] = DEFAULT_BIOMES) -> Item | None:
    """Work out which biome a page belongs to from its document title.

    Site-wide words in the title ("Whispers of the Biomes") never match an
    id, so only the biome name itself counts.
    """
    normalized = title.lower()
    for item in items:
        if item.id in normalized:
            return item
    return None
