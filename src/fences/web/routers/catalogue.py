"""Product catalogue endpoint."""

from fastapi import APIRouter

from fences.web.dependencies import ServiceFactoryDep
from fences.web.schemas.responses import CatalogueSchema

router = APIRouter(prefix="/catalogue", tags=["catalogue"])


@router.get("", response_model=CatalogueSchema)
def get_catalogue(factory: ServiceFactoryDep) -> CatalogueSchema:
    """List the panels and spigots the calculator chooses from."""
    catalogue = factory.catalogue

    def panels(items):
        return [
            {"handle": p.handle, "width": p.width, "height": p.height, "price": p.price}
            for p in items
        ]

    return CatalogueSchema(
        standard_panels=panels(catalogue.standard_panels),
        gate_panels=panels(catalogue.gate_panels),
        hinge_panels=panels(catalogue.hinge_panels),
        posts=[
            {
                "handle": post.handle,
                "description": post.description,
                "mount_type": post.mount_type.value,
                "price": post.price,
            }
            for post in catalogue.posts
        ],
    )
