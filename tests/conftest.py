from typing import Any

import pytest

from vetter import Schema


@pytest.fixture(scope="function")
def product_schema():
    return Schema.object(
        {
            "id": Schema.string().pattern(r"^PRD-\d{4}$").with_message("Product ID must look like PRD-0000"),
            "name": Schema.string().min_length(3).max_length(100),
            "price": Schema.currency().usd().range(0.01, 10000),
            "category": Schema.union(
                Schema.literal("electronics"),
                Schema.literal("clothing"),
                Schema.literal("books"),
            ),
            "in_stock": Schema.boolean(),
            "tags": Schema.array(Schema.string().min_length(2)).non_empty().max_length(5),
            "released": Schema.date().yyyymmdd("-").past(),
            "dimensions": Schema.object(
                {
                    "width": Schema.number().positive(),
                    "height": Schema.number().positive(),
                }
            ).optional(),
        }
    )


@pytest.fixture(scope="function")
def valid_product() -> dict[str, Any]:
    return {
        "id": "PRD-0042",
        "name": "Noise-cancelling headphones",
        "price": "$1,299.99",
        "category": "electronics",
        "in_stock": True,
        "tags": ["audio", "wireless"],
        "released": "2021-09-14",
        "dimensions": {"width": 18.5, "height": 20},
    }


@pytest.fixture(scope="function")
def registration_schema():
    return Schema.object(
        {
            "username": Schema.string().min_length(3).max_length(20).pattern(r"^[a-zA-Z0-9_]+$"),
            "email": Schema.string().email(),
            "age": Schema.number().integer().min(13).max(120),
            "birthday": Schema.date().ddmmyyyy("/").past(),
            "website": Schema.string().url().optional(),
            "terms_accepted": Schema.literal(True),
        }
    )
