"""Repository for the BundleConfiguration aggregate."""

from bundles.bundle.configuration import BundleConfiguration
from bundles.domain import bundles


@bundles.repository(part_of=BundleConfiguration)
class BundleConfigurationRepository:
    def find_all(self) -> list[BundleConfiguration]:
        """All bundle configurations, smallest bundles first."""
        return self._dao.query.order_by("required_quantity").all().items
