from app.schemas.api_schemas import VersionAvailability, VersionVisibility

def resolve_visibility(availability: VersionAvailability) -> VersionVisibility:
    """
    Maps the catalog's availability block for one version onto its visibility.
    Enablement is not part of visibility; the download gate checks it separately.
    """
    return VersionVisibility(
        privacy=availability.access.type,
        logged_in=availability.logged_in,
        authorised=availability.authorised,
    )
