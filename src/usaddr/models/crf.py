"""
Reference linear-chain CRF decoder.

Scores label sequences the same way CRFsuite does: every (feature, label)
pair has a state weight that is multiplied by the feature value, and
adjacent labels add a transition weight. Decoding is Viterbi.
"""

import json
import logging
import os

import torch
import torch.nn as nn

from usaddr.features import FeatureSet
from usaddr.models.config import LABELS

logger = logging.getLogger(__name__)


class LinearChainCRF(nn.Module):
    """
    Linear-chain CRF over sparse named features.

    Features the model has no weights for are ignored, as in CRFsuite.

    Example:
        >>> crf = LinearChainCRF.from_weights({"word=Main": {"StreetName": 2.0}})
        >>> crf.tag([[("word=Main", 1.0)]])
        ['StreetName']
    """

    def __init__(self, labels: list[str] | None = None, attributes: list[str] | None = None):
        """
        Initialize CRF with all-zero weights.

        Args:
            labels: Output label vocabulary
            attributes: Feature names that carry state weights
        """
        super().__init__()
        self.labels = list(labels or LABELS)
        self.num_tags = len(self.labels)
        self.label2id = {label: i for i, label in enumerate(self.labels)}
        self.attributes = {name: i for i, name in enumerate(attributes or [])}

        # state_weights[a, y] = weight of feature a firing with label y
        self.state_weights = nn.Parameter(torch.zeros(len(self.attributes), self.num_tags))

        # transitions[i, j] = score of transitioning from label i to label j
        self.transitions = nn.Parameter(torch.zeros(self.num_tags, self.num_tags))

        self.start_transitions = nn.Parameter(torch.zeros(self.num_tags))
        self.end_transitions = nn.Parameter(torch.zeros(self.num_tags))

    @classmethod
    def from_weights(
        cls,
        state_features: dict[str, dict[str, float]],
        transitions: dict[tuple[str, str], float] | None = None,
        labels: list[str] | None = None,
    ) -> "LinearChainCRF":
        """
        Build a CRF from explicit weights.

        Args:
            state_features: ``{feature name: {label: weight}}``
            transitions: ``{(from label, to label): weight}``
            labels: Output label vocabulary (defaults to the address labels)

        Returns:
            Initialized LinearChainCRF
        """
        crf = cls(labels=labels, attributes=list(state_features))

        with torch.no_grad():
            for name, label_weights in state_features.items():
                row = crf.attributes[name]
                for label, weight in label_weights.items():
                    crf.state_weights[row, crf._label_id(label)] = weight

            for (prev_label, next_label), weight in (transitions or {}).items():
                crf.transitions[crf._label_id(prev_label), crf._label_id(next_label)] = weight

        return crf

    def _label_id(self, label: str) -> int:
        if label not in self.label2id:
            raise ValueError(f"Unknown label: {label}")
        return self.label2id[label]

    def emissions(self, xseq: list[FeatureSet]) -> torch.Tensor:
        """Compute emission scores (seq, num_tags) for a feature sequence."""
        scores = torch.zeros(len(xseq), self.num_tags)

        for i, features in enumerate(xseq):
            for name, weight in features:
                row = self.attributes.get(name)
                if row is not None:
                    scores[i] += weight * self.state_weights[row]

        return scores

    def decode(self, emissions: torch.Tensor) -> list[int]:
        """
        Find the most likely tag sequence using Viterbi algorithm.

        Args:
            emissions: Emission scores (seq, num_tags)

        Returns:
            Best tag ids, one per position
        """
        seq_length = emissions.shape[0]
        if seq_length == 0:
            return []

        score = self.start_transitions + emissions[0]
        history = []

        for i in range(1, seq_length):
            # next_score[prev, cur]
            next_score = score.unsqueeze(1) + self.transitions + emissions[i].unsqueeze(0)
            score, indices = next_score.max(dim=0)
            history.append(indices)

        score = score + self.end_transitions

        best_tags = [int(score.argmax().item())]
        for indices in reversed(history):
            best_tags.append(int(indices[best_tags[-1]].item()))

        best_tags.reverse()
        return best_tags

    def tag(self, xseq: list[FeatureSet]) -> list[str]:
        """Label every item of a feature sequence."""
        with torch.no_grad():
            best_tags = self.decode(self.emissions(xseq))
        return [self.labels[tag_id] for tag_id in best_tags]

    def save_pretrained(self, save_directory: str):
        """Save model to directory."""
        os.makedirs(save_directory, exist_ok=True)

        torch.save(self.state_dict(), os.path.join(save_directory, "crf_weights.bin"))

        config_dict = {
            "labels": self.labels,
            "attributes": list(self.attributes),
        }
        with open(os.path.join(save_directory, "config.json"), "w") as f:
            json.dump(config_dict, f, indent=2)

    @classmethod
    def from_pretrained(cls, model_path: str) -> "LinearChainCRF":
        """Load model from directory."""
        with open(os.path.join(model_path, "config.json")) as f:
            config_dict = json.load(f)

        model = cls(labels=config_dict["labels"], attributes=config_dict["attributes"])
        state_dict = torch.load(os.path.join(model_path, "crf_weights.bin"), map_location="cpu")
        model.load_state_dict(state_dict)
        logger.info("Loaded reference CRF from %s (%d attributes)", model_path, len(model.attributes))

        return model
