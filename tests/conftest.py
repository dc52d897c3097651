"""
Pytest configuration and fixtures for Recipe Draft tests.
"""

import json

import pytest

from recipe_draft.models import RawPage


SOUP_JSON_LD = {
    "@type": "Recipe",
    "name": "Test Soup",
    "recipeIngredient": ["2 cups broth", "1 carrot"],
    "recipeInstructions": "Boil broth.\nAdd carrot.",
}


def page_with_json_ld(data, title: str = "Recipe", body: str = "<p>Hello</p>") -> str:
    return (
        "<html><head>"
        f"<title>{title}</title>"
        '<script type="application/ld+json">'
        f"{json.dumps(data)}"
        "</script>"
        f"</head><body>{body}</body></html>"
    )


def raw_page(html: str, status_code: int = 200, url: str = "https://example.com/recipe") -> RawPage:
    return RawPage(url=url, status_code=status_code, body=html.encode("utf-8"))


@pytest.fixture
def soup_html():
    """Page whose only recipe content is a single JSON-LD Recipe."""
    return page_with_json_ld(SOUP_JSON_LD)


@pytest.fixture
def heuristic_html():
    """Plain recipe page with no structured data."""
    return """
    <html>
    <head>
      <title>Garlic Butter Pasta | Weeknight Kitchen</title>
      <style>.x { color: red; }</style>
    </head>
    <body>
      <h1>Garlic Butter Pasta</h1>
      <p>A quick weeknight pasta tossed in garlic butter and parmesan cheese.</p>
      <div>Prep Time: 10 minutes</div>
      <div>Cook Time: 15 minutes</div>
      <div>Serves: 4</div>
      <div>Difficulty: Easy</div>
      <h2>Ingredients</h2>
      <ul>
        <li>8 oz spaghetti</li>
        <li>4 tbsp butter</li>
        <li>3 cloves garlic, minced</li>
        <li>1/2 cup grated parmesan cheese</li>
        <li>4 tbsp butter</li>
      </ul>
      <h2>Instructions</h2>
      <ol>
        <li>Boil the spaghetti in salted water until al dente.</li>
        <li>Melt the butter in a pan and add the garlic.</li>
        <li>Toss the pasta with the garlic butter and serve with parmesan.</li>
      </ol>
      <h3>Notes</h3>
      <p>Add chili flakes if you like some heat.</p>
    </body>
    </html>
    """


@pytest.fixture
def wprm_html():
    """Page rendered by the WP Recipe Maker plugin."""
    return """
    <html><head><title>Blog</title></head><body>
    <div class="wprm-recipe-container">
      <h2 class="wprm-recipe-name wprm-block-text-bold">Lemon Pancakes</h2>
      <span class="wprm-recipe-prep_time-minutes wprm-recipe-prep_time">10</span>
      <span class="wprm-recipe-cook_time-minutes wprm-recipe-cook_time">20</span>
      <span class="wprm-recipe-servings wprm-recipe-details" data-recipe="123">6</span>
      <span class="wprm-recipe-course wprm-block-text-normal">Breakfast</span>
      <span class="wprm-recipe-cuisine wprm-block-text-normal">American</span>
      <ul class="wprm-recipe-ingredients">
        <li class="wprm-recipe-ingredient" style="list-style-type: disc;">
          <span class="wprm-recipe-ingredient-amount">2</span>
          <span class="wprm-recipe-ingredient-unit">cups</span>
          <span class="wprm-recipe-ingredient-name">flour</span>
        </li>
        <li class="wprm-recipe-ingredient">
          <span class="wprm-recipe-ingredient-amount">1</span>
          <span class="wprm-recipe-ingredient-name">lemon</span>
          <span class="wprm-recipe-ingredient-notes wprm-recipe-ingredient-notes-faded">zested</span>
        </li>
      </ul>
      <ul class="wprm-recipe-instructions">
        <li class="wprm-recipe-instruction">
          <div class="wprm-recipe-instruction-text">Whisk the flour and lemon zest together.</div>
        </li>
        <li class="wprm-recipe-instruction">
          <div class="wprm-recipe-instruction-text">Cook on a hot griddle until golden.</div>
        </li>
      </ul>
    </div>
    </body></html>
    """


@pytest.fixture
def empty_html():
    """Page with a title but no recipe content at all."""
    return "<html><head><title>About Us</title></head><body><p>We love food.</p></body></html>"


@pytest.fixture
def make_page():
    """Factory for RawPage objects built from HTML text."""
    return raw_page


@pytest.fixture
def json_ld_page():
    """Factory for HTML pages carrying one JSON-LD block."""
    return page_with_json_ld
