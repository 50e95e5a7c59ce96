"""Shared HTML fixtures modelled on ilMeteo.it markup."""

import pytest
from bs4 import BeautifulSoup

DAY_LIST_HTML = """
<html><body>
<ul class="forecast_day_selector__list">
  <li class="forecast_day_selector__list__item">
    <a href="/meteo/Pinerolo">Meteo giornaliero</a>
  </li>
  <li class="forecast_day_selector__list__item">
    <a href="/meteo/Pinerolo/domani"><span class="day">Lun</span> <span class="num">25</span></a>
    <span class="s-small" data-simbolo="1"></span>
    <span class="forecast_day_selector__list__item__link__values"><span>3°</span> <span>9°</span></span>
  </li>
  <li class="forecast_day_selector__list__item">
    <a href="/meteo/Pinerolo/3">Mar 26 Dicembre</a>
    <span class="s-small ss-small12"></span>
    <span class="forecast_day_selector__list__item__link__values">5°</span>
  </li>
  <li class="forecast_day_selector__list__item">
    <a href="/meteo/Pinerolo/4">Mer 27</a>
    <span class="s-small nebbia"></span>
    <span class="forecast_day_selector__list__item__link__values">1° 4°</span>
  </li>
  <li class="forecast_day_selector__list__item">
    <a href="/meteo/Pinerolo/5">Gio 28</a>
    <img src="//www.ilmeteo.it/img/meteo/custom.png">
  </li>
</ul>
</body></html>
"""

LEGACY_TABLE_HTML = """
<html><body>
<table>
  <tr><th>Giorno</th><th>Tempo</th><th>Min</th><th>Max</th></tr>
  <tr><td>Lun 25</td><td><img src="/img/meteo/s/pioggia.png"></td><td>3°</td><td>9°</td></tr>
  <tr><td>Lun 25 sera</td><td></td><td>2°</td><td>4°</td></tr>
  <tr><td>Mar 26</td><td></td><td>5°</td><td>12°</td></tr>
  <tr><td>Note</td><td>nessun dato</td></tr>
</table>
</body></html>
"""

HOURLY_HTML = """
<html><body>
<table class="weather_table">
  <thead><tr>
    <th>Ora</th><th>Tempo</th><th>T °C</th><th>Precip.</th><th></th>
    <th>Vento</th><th>Quota 0°</th><th>Aria</th><th>Vis.</th><th>UR%</th>
  </tr></thead>
  <tbody>
    <tr>
      <td>14:00 update</td><td><span class="s-small" data-simbolo="3"></span></td><td>12</td>
      <td><span class="precontainer">2 mm</span></td><td></td><td>SW 10 km/h</td>
      <td>1800</td><td>buona</td><td>&gt;10km</td><td>60</td>
    </tr>
    <tr style="display: none">
      <td>15:00</td><td></td><td>11</td><td></td><td></td><td>S 5 km/h</td>
      <td></td><td></td><td></td><td>62</td>
    </tr>
    <tr class="ad_row">
      <td>16:00</td><td></td><td>11</td><td></td><td></td><td>S 5 km/h</td>
      <td></td><td></td><td></td><td>62</td>
    </tr>
    <tr class="hidden">
      <td>16:30</td><td></td><td>11</td><td></td><td></td><td>S 5 km/h</td>
      <td></td><td></td><td></td><td>62</td>
    </tr>
    <tr class="row separator">
      <td>17:30</td><td></td><td>11</td><td></td><td></td><td>S 5 km/h</td>
      <td></td><td></td><td></td><td>62</td>
    </tr>
    <tr style="color: red;display:none">
      <td>18:30</td><td></td><td>11</td><td></td><td></td><td>S 5 km/h</td>
      <td></td><td></td><td></td><td>62</td>
    </tr>
    <tr>
      <td>abc</td><td></td><td>11</td><td></td><td></td><td>S 5 km/h</td>
      <td></td><td></td><td></td><td>62</td>
    </tr>
    <tr><td>17:00</td><td></td><td>10</td><td></td><td>x</td></tr>
    <tr>
      <td>3</td><td><span class="s-small ss-small113"></span></td><td>-1</td>
      <td><span class="fiocco"></span> 1 mm</td><td></td><td>N 5 km/h</td>
      <td>0</td><td>buona</td><td>5km</td><td>85%</td>
    </tr>
  </tbody>
</table>
<table class="overnight">
  <tr>
    <td>23:00</td><td><span class="s-small sereno"></span></td><td>4</td>
    <td>0</td><td></td><td>NE 3 km/h</td><td></td><td></td><td></td><td>90</td>
  </tr>
</table>
</body></html>
"""

PERCEIVED_HTML = """
<table class="weather_table">
  <thead><tr>
    <th>Ora</th><th>Tempo</th><th>Temp</th><th>Prec</th><th></th><th>Vento</th><th>T. percepita</th>
  </tr></thead>
  <tbody>
    <tr><td>08:00</td><td></td><td>9</td><td>pioggia debole</td><td></td><td>W 8 km/h</td><td>7</td></tr>
    <tr><td>09:00</td><td></td><td>10</td><td>0</td><td></td><td>W 8 km/h</td><td>9°</td></tr>
  </tbody>
</table>
"""

NO_HEADER_HTML = """
<table>
  <tr><td>10:00</td><td></td><td>15</td><td>0</td><td></td><td>E 4 km/h</td>
      <td></td><td></td><td></td><td>70</td></tr>
  <tr><td>11:00</td><td></td><td>16</td><td>0</td><td></td><td>E 4 km/h</td><td>x</td></tr>
</table>
"""

STANDARD_LAYOUT_HTML = """
<table class="weather_table">
  <tbody>
    <tr><td>Ora</td><td>Tempo</td><td>Temp</td><td>Prec</td><td></td><td>Vento</td></tr>
    <tr><td>10</td><td><span data-simbolo="1"></span></td><td>12°</td><td>0</td><td></td>
        <td>N 5 km/h</td><td></td><td></td><td></td><td>55</td></tr>
    <tr><td>11</td><td></td><td>13°</td><td>1 mm</td><td></td>
        <td>N 6 km/h</td><td></td><td></td><td></td><td>50%</td></tr>
  </tbody>
</table>
"""

SEASIDE_LAYOUT_HTML = """
<table class="weather_table">
  <tbody>
    <tr><td>10:00</td><td></td><td>poco mosso</td><td>18°</td><td>1 mm</td><td></td>
        <td>W 12 km/h</td><td></td><td></td><td></td><td>70%</td></tr>
    <tr><td>11:00</td><td></td><td>mosso</td><td>19°</td><td>0</td><td></td>
        <td>W 15 km/h</td></tr>
  </tbody>
</table>
"""

EMPTY_HTML = "<html><body><p>Pagina non disponibile</p></body></html>"


def parse(html):
    return BeautifulSoup(html, 'html.parser')


@pytest.fixture
def day_list_soup():
    return parse(DAY_LIST_HTML)


@pytest.fixture
def legacy_soup():
    return parse(LEGACY_TABLE_HTML)


@pytest.fixture
def hourly_soup():
    return parse(HOURLY_HTML)


@pytest.fixture
def perceived_soup():
    return parse(PERCEIVED_HTML)


@pytest.fixture
def no_header_soup():
    return parse(NO_HEADER_HTML)


@pytest.fixture
def empty_soup():
    return parse(EMPTY_HTML)
