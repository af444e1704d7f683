import pytest

from salesdoc.core.config import DEFAULT_TAX_OPTIONS, TaxOptionSetting
from salesdoc.models.documents import TaxCategory, TaxSelection
from salesdoc.services.tax_catalog import TaxCatalog


@pytest.fixture()
def catalog():
    return TaxCatalog(DEFAULT_TAX_OPTIONS)


def test_default_catalog_offers_gst_tds_tcs(catalog):
    labels = [option.label for option in catalog.options()]
    assert len(labels) == 10
    assert labels[:4] == ["GST (5%)", "GST (12%)", "GST (18%)", "GST (28%)"]
    assert "TCS (0.1%)" in labels


def test_same_rate_in_different_categories_are_distinct(catalog):
    assert catalog.lookup(TaxCategory.GST, 5).label == "GST (5%)"
    assert catalog.lookup(TaxCategory.TDS, 5).label == "TDS (5%)"
    assert catalog.lookup(TaxCategory.TCS, 5) is None


def test_contains(catalog):
    assert catalog.contains(TaxSelection(category=TaxCategory.TDS, rate=2))
    assert catalog.contains(TaxSelection())
    assert catalog.contains(TaxSelection(category=TaxCategory.GST, rate=0))
    assert not catalog.contains(TaxSelection(category=TaxCategory.GST, rate=7))


def test_label_falls_back_for_unlisted_rates(catalog):
    assert catalog.label_for(TaxSelection(category=TaxCategory.TDS, rate=3)) == "TDS (3%)"
    assert catalog.label_for(TaxSelection(rate=4.5)) == "Tax (4.5%)"


def test_configured_labels_and_lowercase_categories():
    catalog = TaxCatalog([TaxOptionSetting(category="tds", rate=2, label="TDS u/s 194C")])
    option = catalog.options()[0]
    assert option.category == TaxCategory.TDS
    assert catalog.label_for(TaxSelection(category=TaxCategory.TDS, rate=2)) == "TDS u/s 194C"


def test_options_returns_a_copy(catalog):
    catalog.options().clear()
    assert len(catalog.options()) == 10
