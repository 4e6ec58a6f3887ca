"""Category management: commands and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer, List, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.category.category import Category
from storefront.domain import storefront
from storefront.shared.text import slugify


@storefront.command(part_of="Category")
class CreateCategory:
    name_en: String(required=True, max_length=200)
    name_sv: String(required=True, max_length=200)
    slug: String(max_length=200)
    description_en: Text()
    description_sv: Text()
    image_url: String(max_length=500)
    parent_id: Identifier()
    sort_order: Integer(default=0)


@storefront.command(part_of="Category")
class UpdateCategory:
    category_id: Identifier(required=True)
    name_en: String(max_length=200)
    name_sv: String(max_length=200)
    slug: String(max_length=200)
    description_en: Text()
    description_sv: Text()
    image_url: String(max_length=500)
    parent_id: Identifier()
    sort_order: Integer()


@storefront.command(part_of="Category")
class DeleteCategory:
    category_id: Identifier(required=True)


@storefront.command(part_of="Category")
class ReorderCategories:
    category_ids: List(content_type=String, required=True)


@storefront.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)
        slug = command.slug or slugify(command.name_en)
        if repo.find_by_slug(slug) is not None:
            raise ValidationError({"slug": ["A category with this slug already exists"]})

        if command.parent_id:
            repo.get(command.parent_id)

        category = Category.create(
            name_en=command.name_en,
            name_sv=command.name_sv,
            slug=slug,
            description_en=command.description_en,
            description_sv=command.description_sv,
            image_url=command.image_url,
            parent_id=command.parent_id,
            sort_order=command.sort_order,
        )
        repo.add(category)
        return str(category.id)

    @handle(UpdateCategory)
    def update_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)

        if command.slug and command.slug != category.slug:
            if repo.find_by_slug(command.slug) is not None:
                raise ValidationError({"slug": ["A category with this slug already exists"]})

        if command.parent_id and str(command.parent_id) == str(category.id):
            raise ValidationError({"parent_id": ["A category cannot be its own parent"]})

        category.update_details(
            name_en=command.name_en,
            name_sv=command.name_sv,
            slug=command.slug,
            description_en=command.description_en,
            description_sv=command.description_sv,
            image_url=command.image_url,
            parent_id=command.parent_id,
            sort_order=command.sort_order,
        )
        repo.add(category)

    @handle(DeleteCategory)
    def delete_category(self, command):
        from storefront.catalogue.product.product import Product

        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)

        products = current_domain.repository_for(Product)._dao.query.filter(category_id=str(category.id)).all()
        if products.total > 0:
            raise ValidationError({"category_id": ["Cannot delete a category that still has products"]})

        repo._dao.delete(category)

    @handle(ReorderCategories)
    def reorder_categories(self, command):
        repo = current_domain.repository_for(Category)
        for position, category_id in enumerate(command.category_ids):
            category = repo.get(category_id)
            category.move_to(position)
            repo.add(category)
