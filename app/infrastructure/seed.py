"""Demonstration catalog.

Loads a small furniture catalog into empty stores: four room categories,
ten products and the gallery images of the first two products.
"""

from datetime import datetime, timezone

from app.domain.entities import (
    Category,
    Product,
    ProductImage,
    ProductSpecifications,
    ViewAngle,
)
from app.domain.slug import generate_slug
from app.infrastructure.store import CatalogStores

PLACEHOLDER = "https://via.placeholder.com"


# ============================================================================
# Seed Data
# ============================================================================

# (name, description, display_order, product_count, color, meta_title, meta_description)
CATEGORIES = [
    (
        "Sala de Estar",
        "Móveis elegantes e confortáveis para sua sala de estar",
        1,
        4,
        "4A5568",
        "Móveis para Sala de Estar | Lozorio Móveis",
        "Encontre sofás, poltronas, racks e aparadores para sua sala de estar",
    ),
    (
        "Quarto",
        "Móveis para criar o quarto dos seus sonhos",
        2,
        2,
        "2C3E50",
        "Móveis para Quarto | Lozorio Móveis",
        "Camas, guarda-roupas e cômodas para seu quarto",
    ),
    (
        "Cozinha",
        "Móveis funcionais e modernos para sua cozinha",
        3,
        2,
        "8B4513",
        "Móveis para Cozinha | Lozorio Móveis",
        "Mesas, cadeiras e armários para sua cozinha",
    ),
    (
        "Escritório",
        "Móveis ergonômicos para seu home office",
        4,
        2,
        "34495E",
        "Móveis para Escritório | Lozorio Móveis",
        "Escrivaninhas e cadeiras ergonômicas para trabalhar em casa",
    ),
]

PRODUCTS = [
    {
        "name": "Sofá Moderno 3 Lugares",
        "description": "Sofá confortável e elegante, perfeito para sala de estar moderna. "
        "Estrutura em madeira maciça com estofado em tecido de alta qualidade.",
        "category": "Sala de Estar",
        "color": "4A5568",
        "label": "Sofa+Moderno",
        "extra": ["Sofa+Lateral", "Sofa+Detalhe"],
        "dimensions": "220cm x 90cm x 85cm",
        "material": "Madeira maciça, tecido premium",
        "created": "2024-01-15",
    },
    {
        "name": "Mesa de Jantar Rústica",
        "description": "Mesa de jantar em madeira maciça com acabamento rústico. "
        "Comporta até 8 pessoas confortavelmente.",
        "category": "Cozinha",
        "color": "8B4513",
        "label": "Mesa+Rustica",
        "extra": ["Mesa+Detalhe"],
        "dimensions": "200cm x 100cm x 75cm",
        "material": "Madeira de demolição",
        "created": "2024-01-20",
    },
    {
        "name": "Cama Box Queen Size",
        "description": "Cama box confortável com colchão ortopédico incluído. "
        "Base reforçada e cabeceira estofada.",
        "category": "Quarto",
        "color": "2C3E50",
        "label": "Cama+Queen",
        "extra": [],
        "dimensions": "158cm x 198cm x 60cm",
        "material": "MDF, espuma D33",
        "created": "2024-02-01",
    },
    {
        "name": "Escrivaninha Home Office",
        "description": "Escrivaninha compacta ideal para home office. "
        "Design minimalista com gavetas organizadoras.",
        "category": "Escritório",
        "color": "34495E",
        "label": "Escrivaninha",
        "extra": ["Gavetas"],
        "dimensions": "120cm x 60cm x 75cm",
        "material": "MDP, pés em aço",
        "created": "2024-02-10",
    },
    {
        "name": "Poltrona Decorativa",
        "description": "Poltrona confortável com design contemporâneo. "
        "Ideal para compor ambientes aconchegantes.",
        "category": "Sala de Estar",
        "color": "7F8C8D",
        "label": "Poltrona",
        "extra": [],
        "dimensions": "80cm x 85cm x 90cm",
        "material": "Veludo, estrutura em madeira",
        "created": "2024-02-15",
    },
    {
        "name": "Guarda-Roupa 6 Portas",
        "description": "Guarda-roupa espaçoso com 6 portas e gavetas internas. "
        "Acabamento em laminado resistente.",
        "category": "Quarto",
        "color": "95A5A6",
        "label": "Guarda-Roupa",
        "extra": ["Interior"],
        "dimensions": "270cm x 220cm x 60cm",
        "material": "MDP laminado",
        "created": "2024-02-20",
    },
    {
        "name": "Rack para TV",
        "description": "Rack moderno para TV até 65 polegadas. "
        "Com nichos e gavetas para organização.",
        "category": "Sala de Estar",
        "color": "5D6D7E",
        "label": "Rack+TV",
        "extra": [],
        "dimensions": "180cm x 45cm x 50cm",
        "material": "MDF com pintura UV",
        "created": "2024-03-01",
    },
    {
        "name": "Cadeira de Escritório Ergonômica",
        "description": "Cadeira ergonômica com ajuste de altura e apoio lombar. "
        "Ideal para longas jornadas de trabalho.",
        "category": "Escritório",
        "color": "566573",
        "label": "Cadeira+Ergonomica",
        "extra": ["Ajustes"],
        "dimensions": "60cm x 60cm x 110cm",
        "material": "Tela mesh, base giratória",
        "created": "2024-03-05",
    },
    {
        "name": "Aparador Decorativo",
        "description": "Aparador elegante para hall de entrada ou sala de jantar. "
        "Com espelho e gavetas.",
        "category": "Sala de Estar",
        "color": "717D7E",
        "label": "Aparador",
        "extra": [],
        "dimensions": "120cm x 40cm x 85cm",
        "material": "Madeira maciça",
        "created": "2024-03-10",
    },
    {
        "name": "Conjunto de Cadeiras para Jantar",
        "description": "Conjunto com 6 cadeiras estofadas para mesa de jantar. "
        "Design clássico e confortável.",
        "category": "Cozinha",
        "color": "85929E",
        "label": "Cadeiras+Jantar",
        "extra": ["Detalhe+Estofado"],
        "dimensions": "45cm x 50cm x 95cm (cada)",
        "material": "Madeira, estofado em couro sintético",
        "created": "2024-03-15",
    },
]

# product index -> [(label, view_angle, caption, alt_text)]
GALLERIES = {
    0: [
        ("Sofa+Frontal", ViewAngle.FRONTAL, "Vista frontal do sofá",
         "Sofá moderno 3 lugares - vista frontal"),
        ("Sofa+Lateral", ViewAngle.LATERAL_ESQUERDA, "Vista lateral do sofá",
         "Sofá moderno 3 lugares - vista lateral"),
        ("Sofa+Detalhe", ViewAngle.DETALHE, "Detalhe do estofado",
         "Sofá moderno 3 lugares - detalhe do estofado"),
    ],
    1: [
        ("Mesa+Frontal", ViewAngle.FRONTAL, None,
         "Mesa de jantar rústica - vista frontal"),
        ("Mesa+Superior", ViewAngle.SUPERIOR, "Vista superior da mesa",
         "Mesa de jantar rústica - vista superior"),
        ("Mesa+Detalhe", ViewAngle.DETALHE, "Detalhe da madeira",
         "Mesa de jantar rústica - detalhe da madeira"),
        ("Mesa+Ambiente", ViewAngle.AMBIENTE, "Mesa em ambiente decorado",
         "Mesa de jantar rústica - em ambiente"),
    ],
}


def _date(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


def _image(size: str, color: str, label: str) -> str:
    return f"{PLACEHOLDER}/{size}/{color}/FFFFFF?text={label}"


# ============================================================================
# Loader
# ============================================================================


def seed_catalog(stores: CatalogStores) -> None:
    """Populate empty stores with the demonstration catalog.

    Args:
        stores: Stores to fill.
    """
    category_date = _date("2024-01-01")
    for name, description, order, count, color, meta_title, meta_desc in CATEGORIES:
        stores.categories.add(
            Category(
                id=stores.categories.next_id(),
                name=name,
                slug=generate_slug(name),
                description=description,
                image_url=_image("300x300", color, name.replace(" ", "+")),
                display_order=order,
                featured=True,
                meta_title=meta_title,
                meta_description=meta_desc,
                product_count=count,
                date_created=category_date,
                date_modified=category_date,
            )
        )

    product_ids = []
    for data in PRODUCTS:
        created = _date(data["created"])
        product = stores.products.add(
            Product(
                id=stores.products.next_id(),
                name=data["name"],
                description=data["description"],
                category=data["category"],
                image_url=_image("400x300", data["color"], data["label"]),
                additional_images=[
                    _image("400x300", data["color"], label) for label in data["extra"]
                ],
                specifications=ProductSpecifications(
                    dimensions=data["dimensions"],
                    material=data["material"],
                ),
                date_created=created,
                date_modified=created,
            )
        )
        product_ids.append(product.id)

    for index, gallery in GALLERIES.items():
        product = stores.products.get_by_id(product_ids[index])
        color = PRODUCTS[index]["color"]
        for order, (label, angle, caption, alt_text) in enumerate(gallery, start=1):
            stores.images.add(
                ProductImage(
                    id=stores.images.next_id(),
                    product_id=product.id,
                    image_url=_image("800x600", color, label),
                    thumbnail_url=_image("200x150", color, label),
                    high_res_url=_image("1600x1200", color, f"{label}+HD"),
                    display_order=order,
                    caption=caption,
                    alt_text=alt_text,
                    view_angle=angle,
                    date_created=product.date_created,
                    date_modified=product.date_created,
                )
            )
