"""Tests for food page field extraction."""

import pytest

from nutrition_scraper.domain.nutrients import NutrientField
from nutrition_scraper.services.extraction import PageExtractor


def test_extracts_food_identity(br_page_html: str) -> None:
    page = PageExtractor().extract(br_page_html)

    assert page.layout == "international"
    assert page.food.name == "Banana Prata"
    assert page.food.brand == "Turma da Fruta"
    assert page.food.id_fatsecret == 12345
    assert page.food.photo == "/static/banana-prata.jpg"


def test_photo_url_is_absolutized_with_base_url(br_page_html: str) -> None:
    extractor = PageExtractor(base_url="https://mobile.fatsecret.com.br/calorias/x")

    page = extractor.extract(br_page_html)

    assert page.food.photo == "https://mobile.fatsecret.com.br/static/banana-prata.jpg"


def test_extracts_serving_size(br_page_html: str) -> None:
    page = PageExtractor().extract(br_page_html)

    assert page.serving.value == pytest.approx(49.5)
    assert page.serving.unit == "g"
    assert page.portion_description == "1 pequena (49,5 g)"


def test_extracts_macro_summary(br_page_html: str) -> None:
    macros = PageExtractor().extract(br_page_html).macros

    assert macros.calories == 44
    assert macros.fat == pytest.approx(0.05)
    assert macros.carbohydrate == pytest.approx(11.42)
    assert macros.protein == pytest.approx(0.64)


def test_extracts_nutrient_table(br_page_html: str) -> None:
    nutrients = PageExtractor().extract(br_page_html).nutrients

    assert nutrients["Sódio"].value == 293
    assert nutrients["Sódio"].unit == "mg"
    assert nutrients["Gordura Trans"].value == pytest.approx(0.819)
    assert nutrients["Gordura Saturada"].value == pytest.approx(0.017)
    assert nutrients["Gordura Saturada"].unit == "g"
    assert nutrients["Fibras"].value == pytest.approx(1.3)
    assert nutrients["Colesterol"].value is None
    assert nutrients["Vitamina D"].value is None
    assert nutrients["Potássio"].value is None
    assert "" not in nutrients


def test_nutrient_lookup_prefers_portuguese_label(br_page_html: str) -> None:
    page = PageExtractor().extract(br_page_html)

    assert page.nutrient_value(NutrientField.SODIUM) == 293
    assert page.nutrient_value(NutrientField.IRON) is None


def test_extracts_us_layout(us_page_html: str) -> None:
    page = PageExtractor().extract(us_page_html)

    assert page.layout == "us"
    assert page.food.id_fatsecret == 67890
    assert page.food.brand is None
    assert page.food.photo is None
    assert page.serving.value == 118
    assert page.macros.calories is None
    assert page.nutrient_value(NutrientField.FAT) == pytest.approx(0.39)
    assert page.nutrient_value(NutrientField.SATURATED_FAT) == pytest.approx(0.132)
    assert page.nutrient_value(NutrientField.VITAMIN_C) == pytest.approx(10.3)


def test_missing_panel_returns_none() -> None:
    assert PageExtractor().extract("<html><body></body></html>") is None


def test_id_falls_back_to_absent() -> None:
    html = '<div class="nutrition_facts us"></div>'

    page = PageExtractor().extract(html)

    assert page.food.id_fatsecret is None
    assert page.food.name is None
    assert page.serving.value is None
    assert page.serving.unit == "g"


def test_repeated_nutrient_label_keeps_last_value() -> None:
    html = """
    <div class="nutrition_facts international">
      <div class="row">
        <div class="nutrient left">Sódio</div>
        <div class="nutrient right">120mg</div>
      </div>
      <div class="row">
        <div class="nutrient left">Sódio</div>
        <div class="nutrient right">293mg</div>
      </div>
    </div>
    """

    nutrients = PageExtractor().extract(html).nutrients

    assert nutrients["Sódio"].value == 293
    assert nutrients["Sódio"].unit == "mg"
