"""Tests for tagger backends."""

import pycrfsuite
import pytest

from usaddr import AddressParser
from usaddr.exceptions import InitializationError
from usaddr.features import Feature
from usaddr.models import LABELS, CRFSuiteTagger, LinearChainCRF, SequenceTagger


class TestLinearChainCRF:
    """Test cases for the reference CRF decoder."""

    def test_state_weights(self):
        crf = LinearChainCRF.from_weights({"word=Main": {"StreetName": 2.0}})
        assert crf.tag([[Feature("word=Main", 1.0)]]) == ["StreetName"]

    def test_feature_value_scales_weight(self):
        crf = LinearChainCRF.from_weights(
            {"a": {"PlaceName": 1.0}, "b": {"StateName": 2.0}},
        )
        assert crf.tag([[("a", 1.0), ("b", 1.0)]]) == ["StateName"]
        assert crf.tag([[("a", 1.0), ("b", 0.0)]]) == ["PlaceName"]

    def test_duplicate_features_are_summed(self):
        crf = LinearChainCRF.from_weights(
            {"a": {"PlaceName": 1.0}, "b": {"StateName": 1.5}},
        )
        assert crf.tag([[("a", 1.0), ("a", 1.0), ("b", 1.0)]]) == ["PlaceName"]

    def test_transitions_change_best_path(self):
        labels = ["A", "B"]
        state = {"x": {"A": 1.0, "B": 0.5}, "y": {"A": 1.0, "B": 0.8}}
        xseq = [[("x", 1.0)], [("y", 1.0)]]

        free = LinearChainCRF.from_weights(state, labels=labels)
        assert free.tag(xseq) == ["A", "A"]

        penalized = LinearChainCRF.from_weights(state, transitions={("A", "A"): -5.0}, labels=labels)
        assert penalized.tag(xseq) == ["A", "B"]

    def test_unknown_features_ignored(self):
        crf = LinearChainCRF.from_weights({"word=IL": {"StateName": 1.0}})
        assert crf.tag([[("word=IL", 1.0), ("never.seen", 1.0)]]) == ["StateName"]

    def test_empty_sequence(self):
        crf = LinearChainCRF.from_weights({})
        assert crf.tag([]) == []

    def test_length_preserving(self, reference_crf):
        xseq = [[("word=Main", 1.0)] for _ in range(7)]
        labels = reference_crf.tag(xseq)
        assert len(labels) == 7
        assert set(labels) <= set(LABELS)

    def test_unknown_label_rejected(self):
        with pytest.raises(ValueError):
            LinearChainCRF.from_weights({"a": {"NotALabel": 1.0}})

    def test_save_and_load(self, reference_crf, tmp_path):
        reference_crf.save_pretrained(str(tmp_path / "crf"))
        loaded = LinearChainCRF.from_pretrained(str(tmp_path / "crf"))

        xseq = [[("address.start", 1.0), ("digits=all_digits", 1.0)], [("word=Main", 1.0)]]
        assert loaded.tag(xseq) == reference_crf.tag(xseq) == ["AddressNumber", "StreetName"]
        assert loaded.labels == reference_crf.labels

    def test_satisfies_protocol(self, reference_crf):
        assert isinstance(reference_crf, SequenceTagger)


class TestCRFSuiteTagger:
    """Test cases for the CRFsuite adapter."""

    def test_missing_model(self, tmp_path):
        with pytest.raises(InitializationError):
            CRFSuiteTagger.from_pretrained(tmp_path / "missing.crfsuite")

    def test_malformed_model(self, tmp_path):
        model_path = tmp_path / "broken.crfsuite"
        model_path.write_bytes(b"definitely not a crfsuite model")
        with pytest.raises(InitializationError):
            CRFSuiteTagger.from_pretrained(model_path)

    def test_item_conversion_sums_duplicates(self):
        item = CRFSuiteTagger._to_item([("a", 1.0), ("b", 0.0), ("a", 1.0)])
        assert item == {"a": 2.0, "b": 0.0}


TRAINING_ADDRESSES = [
    (
        "123 Main St., Springfield, IL 62704",
        ["AddressNumber", "StreetName", "StreetNamePostType", "PlaceName", "StateName", "ZipCode"],
    ),
    (
        "456 Oak Street, Chicago, IL 60601",
        ["AddressNumber", "StreetName", "StreetNamePostType", "PlaceName", "StateName", "ZipCode"],
    ),
]


@pytest.fixture
def crfsuite_model(tmp_path, parser):
    """Train a small CRFsuite model on pipeline features."""
    trainer = pycrfsuite.Trainer(verbose=False)
    for address, labels in TRAINING_ADDRESSES:
        xseq = parser.features(parser.tokenize(address))
        trainer.append([CRFSuiteTagger._to_item(features) for features in xseq], labels)
    trainer.set_params({"c1": 0.0, "c2": 0.001, "max_iterations": 100})

    model_path = tmp_path / "usaddr.crfsuite"
    trainer.train(str(model_path))
    return model_path


class TestCRFSuiteTagging:
    """Test cases for tagging with a trained CRFsuite model."""

    def test_parse_example(self, crfsuite_model):
        address_parser = AddressParser.from_pretrained(crfsuite_model)

        tokens = address_parser.tokenize("123 Main St., Springfield, IL 62704")
        labels = address_parser.tagger.tag(address_parser.features(tokens))
        assert len(tokens) == len(labels) == 6

        assert address_parser.tag("123 Main St., Springfield, IL 62704") == [
            ("123", "AddressNumber"),
            ("Main", "StreetName"),
            ("St.", "StreetNamePostType"),
            ("Springfield", "PlaceName"),
            ("IL", "StateName"),
            ("62704", "ZipCode"),
        ]

    def test_feature_names_with_separators(self, crfsuite_model, parser):
        xseq = parser.features(["62704"])
        assert "length=d:5" in {name for name, _ in xseq[0]}

        tagger = CRFSuiteTagger.from_pretrained(crfsuite_model)
        assert len(tagger.tag(xseq)) == 1

    def test_labels(self, crfsuite_model):
        tagger = CRFSuiteTagger.from_pretrained(crfsuite_model)
        assert set(tagger.labels) == set(TRAINING_ADDRESSES[0][1])
        assert set(tagger.labels) <= set(LABELS)

    def test_satisfies_protocol(self, crfsuite_model):
        assert isinstance(CRFSuiteTagger.from_pretrained(crfsuite_model), SequenceTagger)


class TestLabels:

    def test_vocabulary(self):
        from usaddr.models.config import ID2LABEL, LABEL2ID

        assert len(LABELS) == 26
        assert LABELS[0] == "AddressNumberPrefix"
        assert "NotAddress" in LABELS
        assert all(ID2LABEL[LABEL2ID[label]] == label for label in LABELS)
