"""Tests for corpus evaluation."""

import pytest

from usaddr.evaluation import EvaluationReport, evaluate, fuzzy_labels, read_tagged_addresses

CORPUS = """<?xml version="1.0" encoding="UTF-8"?>
<AddressCollection>
  <AddressString><AddressNumber>123</AddressNumber> <StreetName>Main</StreetName> <StreetNamePostType>St.,</StreetNamePostType> <PlaceName>Springfield,</PlaceName> <StateName>IL</StateName> <ZipCode>62704</ZipCode></AddressString>
  <AddressString><AddressNumber>9</AddressNumber> <PlaceName>Main</PlaceName></AddressString>
</AddressCollection>
"""


@pytest.fixture
def corpus(tmp_path):
    path = tmp_path / "labeled.xml"
    path.write_text(CORPUS, encoding="utf-8")
    return path


class TestReadTaggedAddresses:

    def test_reads_addresses_and_labels(self, corpus):
        addresses, labels = read_tagged_addresses(corpus)
        assert addresses == ["123 Main St., Springfield, IL 62704", "9 Main"]
        assert labels[0] == [
            "AddressNumber", "StreetName", "StreetNamePostType",
            "PlaceName", "StateName", "ZipCode",
        ]
        assert labels[1] == ["AddressNumber", "PlaceName"]


class TestFuzzyLabels:

    def test_collapses_variants(self):
        assert fuzzy_labels(["StreetNamePostType", "AddressNumberSuffix", "Null", "ZipCode"]) == [
            "StreetName", "AddressNumber", "NotAddress", "ZipCode",
        ]


class TestEvaluate:

    def test_exact(self, parser, corpus):
        report = evaluate(parser, corpus)
        assert report.n_addresses == 2
        assert report.n_tags == 8
        assert report.errors == ["1. Mismatched tag: StreetName != PlaceName"]
        assert report.failed_addresses == {1}
        assert report.tag_error_rate == pytest.approx(1 / 8)
        assert report.address_error_rate == pytest.approx(0.5)

    def test_fuzzy(self, parser, corpus):
        report = evaluate(parser, corpus, fuzzy=True)
        assert report.failed_addresses == {1}

    def test_length_mismatch(self, parser, tmp_path):
        path = tmp_path / "short.xml"
        path.write_text(
            "<AddressCollection><AddressString><AddressNumber>123 Main</AddressNumber></AddressString></AddressCollection>",
            encoding="utf-8",
        )
        report = evaluate(parser, path)
        assert report.errors[0] == "0. Mismatched length: 2 != 1"
        assert report.failed_addresses == {0}

    def test_summary(self):
        report = EvaluationReport(n_addresses=4, n_tags=10, errors=["0. Mismatched tag: A != B"], failed_addresses={0})
        assert report.summary() == (
            "There were 1 mistagged address components of 10 (10.0%). "
            "1 partially failed addresses of 4 (25.0%)"
        )

    def test_empty_report(self):
        report = EvaluationReport()
        assert report.tag_error_rate == 0.0
        assert report.address_error_rate == 0.0
