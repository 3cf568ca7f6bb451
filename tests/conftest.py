import pytest

from content_codegen.codegen.core.schema import ContentType, Element


TYPES_RESPONSE = {
    "types": [
        {
            "system": {
                "id": "b2c14f2c-6467-460b-a70b-bca17972a33a",
                "name": "Article",
                "codename": "article",
                "last_modified": "2017-08-02T07:33:28.2997578Z",
            },
            "elements": {
                "title": {"type": "text", "name": "Title"},
                "post_date": {"type": "date_time", "name": "Post date"},
                "body_copy": {"type": "rich_text", "name": "Body Copy"},
                "teaser_image": {"type": "asset", "name": "Teaser image"},
                "personas": {
                    "type": "taxonomy",
                    "name": "Personas",
                    "taxonomy_group": "personas",
                },
                "related_articles": {"type": "modular_content", "name": "Related articles"},
                "url_pattern": {"type": "url_slug", "name": "URL pattern"},
            },
        },
        {
            "system": {"name": "Coffee", "codename": "coffee"},
            "elements": {
                "product_name": {"type": "text", "name": "Product name"},
                "price": {"type": "number", "name": "Price"},
                "processing": {
                    "type": "multiple_choice",
                    "name": "Processing",
                    "options": [{"name": "Wet (Washed)", "codename": "wet__washed_"}],
                },
                "custom_widget": {"type": "custom", "name": "Widget"},
            },
        },
    ],
    "pagination": {"skip": 0, "limit": 0, "count": 2, "next_page": ""},
}


@pytest.fixture
def types_response():
    return TYPES_RESPONSE


@pytest.fixture
def article_type() -> ContentType:
    return ContentType.from_elements(
        "article",
        [
            Element("title", "text"),
            Element("post_date", "date_time"),
            Element("unknown_feature", "zzz_future_kind"),
        ],
    )


@pytest.fixture
def empty_type() -> ContentType:
    return ContentType("landing_page", {})
