"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from nutrition_scraper.adapters.sink_client import RecordSink, SinkError
from nutrition_scraper.config import Settings

BR_PAGE_HTML = """
<html>
<head>
  <link rel="alternate" href="android-app://com.fatsecret.android/fatsecret/id/f/12345">
</head>
<body>
  <div class="page-title-prefix"><h2>Turma da Fruta</h2></div>
  <div class="page-title"><h1>Banana Prata</h1></div>
  <div class="carousel">
    <div class="carousel-item"><img src="/static/banana-prata.jpg"></div>
    <div class="carousel-item"><img src="/static/banana-2.jpg"></div>
  </div>
  <select class="portion-picker">
    <option>100 g</option>
    <option selected>1 pequena (49,5 g)</option>
  </select>
  <table class="macroBox">
    <tr>
      <td><div class="light-text">44</div></td><td></td>
      <td><div class="light-text">0,05g</div></td><td></td>
      <td><div class="light-text">11,42g</div></td><td></td>
      <td><div class="light-text">0,64g</div></td>
    </tr>
  </table>
  <div class="nutrition_facts international">
    <div class="serving_size_value">1 pequena (49,5 g)</div>
    <div class="row">
      <div class="nutrient black left">Gorduras</div>
      <div class="nutrient right">0,05g</div>
    </div>
    <div class="row">
      <div class="nutrient sub left">Gordura Trans</div>
      <div class="spacer"></div>
      <div class="nutrient right">0,819 g</div>
    </div>
    <div class="row">
      <div class="nutrient sub left">Gordura Saturada</div>
      <div class="nutrient right">17mg</div>
    </div>
    <div class="row">
      <div class="nutrient left">Colesterol</div>
      <div class="nutrient right">-</div>
    </div>
    <div class="row">
      <div class="nutrient left">Sódio</div>
      <div class="nutrient right">293mg</div>
    </div>
    <div class="row">
      <div class="nutrient left">Potássio</div>
    </div>
    <div class="row">
      <div class="nutrient left">Fibras</div>
      <div class="nutrient right"><span>1</span>,<span>3</span>g</div>
    </div>
    <div class="row">
      <div class="nutrient left">Vitamina D</div>
      <div class="nutrient right">12%</div>
    </div>
    <div class="row">
      <div class="nutrient left">&nbsp;</div>
      <div class="nutrient right">5g</div>
    </div>
  </div>
  <div class="section">
    <div class="section-title"><h2>Quantidades comuns</h2></div>
    <table class="list">
      <tbody>
        <tr><th>Porção</th><th>Calorias</th></tr>
        <tr>
          <td>
            <a href="/calorias/banana-prata?portionid=1">1 pequena</a>
            <span class="small-text">(49,5 g)</span>
          </td>
          <td><a href="/calorias/banana-prata?portionid=1">44</a></td>
        </tr>
        <tr>
          <td><a href="/calorias/banana-prata?portionid=2">100 g</a></td>
          <td><a href="/calorias/banana-prata?portionid=2">89</a></td>
        </tr>
        <tr>
          <td>
            <a href="/calorias/banana-prata?portionid=3">1 xícara</a>
            <span class="small-text">(fatiada)</span>
          </td>
          <td><a href="/calorias/banana-prata?portionid=3">133,5</a></td>
        </tr>
      </tbody>
    </table>
  </div>
</body>
</html>
"""

US_PAGE_HTML = """
<html>
<body>
  <div class="page-title"><h1>Banana</h1></div>
  <div class="nutpanel-extension">
    <a href="/Diary.aspx?pa=fe&amp;rid=67890">Edit this Food</a>
  </div>
  <select class="portion-picker">
    <option selected>1 medium (118 g)</option>
  </select>
  <div class="nutrition_facts us">
    <div class="nutrient black left">Total Fat</div>
    <div class="nutrient value left">0.39g</div>
    <div class="nutrient sub left">Saturated Fat</div>
    <div class="nutrient value left">132mg</div>
    <div class="nutrient left">Sodium</div>
    <div class="nutrient value left">1mg</div>
    <div class="nutrient left">Total Carbohydrate</div>
    <div class="nutrient value left">26.95g</div>
    <div class="nutrient left">Sugars</div>
    <div class="nutrient value left">14.43g</div>
    <div class="nutrient left">Protein</div>
    <div class="nutrient value left">1.29g</div>
    <div class="nutrient left">Vitamin C</div>
    <div class="nutrient value left">10.3mg</div>
  </div>
</body>
</html>
"""

NO_PANEL_HTML = """
<html><body><div class="page-title"><h1>Not a food page</h1></div></body></html>
"""


@dataclass
class FakeRecordSink(RecordSink):
    """Fake sink that records submitted payloads."""

    response: object = field(default_factory=lambda: {"status": "ok"})
    error: SinkError | None = None
    payloads: list[dict[str, object]] = field(default_factory=list)

    async def submit(self, payload: dict[str, object]) -> object:
        self.payloads.append(payload)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def settings() -> Settings:
    return Settings(
        sink_base_url="https://backend.test",
        sink_region="BR",
        sink_language="",
        sink_source="mobile",
    )


@pytest.fixture
def br_page_html() -> str:
    return BR_PAGE_HTML


@pytest.fixture
def us_page_html() -> str:
    return US_PAGE_HTML


@pytest.fixture
def record_sink() -> FakeRecordSink:
    return FakeRecordSink()
