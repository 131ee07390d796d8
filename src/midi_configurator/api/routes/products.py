"""Product catalog routes."""

from fastapi import APIRouter, HTTPException, status

from midi_configurator.configurator.products import UnknownProductError, get_product

router = APIRouter()


@router.get("/{product}/palette")
async def get_palette(product: str):
    """Swatches offered per view bucket for a product."""
    try:
        definition = get_product(product)
    except UnknownProductError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown product: {product}",
        )
    return {
        "product": definition.name,
        "title": definition.title,
        "views": [view.value for view in definition.views],
        "palette": definition.palette.to_dict(),
    }
