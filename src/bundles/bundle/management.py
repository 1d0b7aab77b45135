"""Bundle configuration management — commands and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from bundles.bundle.configuration import BundleConfiguration
from bundles.domain import bundles
from bundles.product.product import Product


@bundles.command(part_of="BundleConfiguration")
class ConfigureBundle:
    bundle_product_id: Identifier(required=True)
    allowed_category: String(required=True, max_length=100)
    required_quantity: Integer(required=True)
    discount_percentage: Float(default=0.0)


@bundles.command(part_of="BundleConfiguration")
class UpdateBundleConfiguration:
    bundle_product_id: Identifier(required=True)
    allowed_category: String(max_length=100)
    required_quantity: Integer()
    discount_percentage: Float()


@bundles.command_handler(part_of=BundleConfiguration)
class ManageBundleHandler:
    @handle(ConfigureBundle)
    def configure_bundle(self, command):
        # Raises ObjectNotFoundError when the bundle product does not exist
        current_domain.repository_for(Product).get(command.bundle_product_id)

        repo = current_domain.repository_for(BundleConfiguration)
        try:
            repo.get(command.bundle_product_id)
        except ObjectNotFoundError:
            pass
        else:
            raise ValidationError(
                {"bundle_product_id": [f"Bundle {command.bundle_product_id} is already configured"]}
            )

        configuration = BundleConfiguration.create(
            bundle_product_id=command.bundle_product_id,
            allowed_category=command.allowed_category,
            required_quantity=command.required_quantity,
            discount_percentage=command.discount_percentage,
        )
        repo.add(configuration)
        return str(configuration.bundle_product_id)

    @handle(UpdateBundleConfiguration)
    def update_configuration(self, command):
        repo = current_domain.repository_for(BundleConfiguration)
        configuration = repo.get(command.bundle_product_id)
        configuration.update(
            allowed_category=command.allowed_category,
            required_quantity=command.required_quantity,
            discount_percentage=command.discount_percentage,
        )
        repo.add(configuration)
