"""Phoneme vectors built from pratyāhāra membership."""
# pylint: disable=too-many-instance-attributes
from __future__ import annotations

from typing import Dict, List, Optional, Sequence

import numpy as np

from pratyahara.registry.named_groups import REGISTRY, PratyaharaRegistry
from pratyahara.sivasutra.alphabet import PHONEME_INVENTORY
from pratyahara.sivasutra.classifier import REFERENCE_SETS
from pratyahara.util.normalization import normalize_iast


class GroupEmbedder:
    """
    Encode Śivasūtra phonemes as fixed-length vectors.

    Embedding per phoneme:
       [ phoneme_one_hot (42)
       || named_group_multi_hot (one bit per registry entry)
       || reference_class_bits (vowels, consonants, semivowels, nasals) ]
    """

    def __init__(self, registry: Optional[PratyaharaRegistry] = None):
        self.registry = registry if registry is not None else REGISTRY

        self.phonemes: List[str] = list(PHONEME_INVENTORY)
        self.phoneme_to_index: Dict[str, int] = {
            ph: i for i, ph in enumerate(self.phonemes)
        }
        self.index_to_phoneme: Dict[int, str] = dict(enumerate(self.phonemes))
        self.n_phonemes: int = len(self.phonemes)

        self.group_names: List[str] = self.registry.names()
        self.n_groups: int = len(self.group_names)

        self.class_names: List[str] = list(REFERENCE_SETS)
        self.n_classes: int = len(self.class_names)

        # Offsets inside embedding vector
        self.idx_group_start: int = self.n_phonemes
        self.idx_class_start: int = self.idx_group_start + self.n_groups
        self.embedding_dim: int = self.n_phonemes + self.n_groups + self.n_classes

    # ------------------------------------------------------------------
    # ENCODE / DECODE
    # ------------------------------------------------------------------
    def encode(self, phoneme: str) -> np.ndarray:
        """Vector for one phoneme; unknown phonemes map to all zeros."""
        vec = np.zeros(self.embedding_dim, dtype=float)
        phoneme = normalize_iast(phoneme or "")
        idx = self.phoneme_to_index.get(phoneme)
        if idx is None:
            return vec
        vec[idx] = 1.0
        for i, name in enumerate(self.group_names):
            if phoneme in self.registry.phonemes(name):
                vec[self.idx_group_start + i] = 1.0
        for i, name in enumerate(self.class_names):
            if phoneme in REFERENCE_SETS[name]:
                vec[self.idx_class_start + i] = 1.0
        return vec

    def encode_sequence(self, phonemes: Sequence[str]) -> List[np.ndarray]:
        return [self.encode(ph) for ph in phonemes]

    def decode(self, vec) -> Dict:
        """Return phoneme, group names and class names held in `vec`."""
        vec = np.asarray(vec, dtype=float)
        if vec.ndim != 1 or vec.shape[0] != self.embedding_dim:
            raise ValueError("Encoding must be a 1-D vector matching embedding_dim")

        phoneme_slice = vec[: self.n_phonemes]
        phoneme = ""
        if phoneme_slice.size and np.max(phoneme_slice) > 0:
            phoneme = self.index_to_phoneme.get(int(np.argmax(phoneme_slice)), "")

        group_slice = vec[self.idx_group_start : self.idx_class_start]
        class_slice = vec[self.idx_class_start : self.embedding_dim]
        return {
            "phoneme": phoneme,
            "groups": [
                name for name, bit in zip(self.group_names, group_slice) if bit > 0
            ],
            "classes": [
                name for name, bit in zip(self.class_names, class_slice) if bit > 0
            ],
        }

    # ------------------------------------------------------------------
    # DISPLAY
    # ------------------------------------------------------------------
    def encoding_to_string(self, encoding, style: str = "short") -> str:
        """
        Render one vector, or a sequence of vectors one per line.

        - short: values only, aligned on the phoneme column for sequences.
        - long : labeled "Phoneme: ... | Groups: ... | Classes: ..." fields.
        """
        if style not in ("short", "long"):
            raise ValueError("style must be 'short' or 'long'")

        enc = np.asarray(encoding, dtype=float)
        if enc.size == 0:
            return ""
        if enc.ndim == 1:
            return self._format_line(enc, style)
        if enc.ndim != 2:
            raise ValueError("Encoding must be a vector or a sequence of vectors")
        return "\n".join(
            f"[{i}] {self._format_line(row, style)}" for i, row in enumerate(enc)
        )

    def _format_line(self, vec: np.ndarray, style: str) -> str:
        decoded = self.decode(vec)
        parts = [
            ("Phoneme", decoded["phoneme"] or "-"),
            ("Groups", ",".join(decoded["groups"]) or "-"),
            ("Classes", ",".join(decoded["classes"]) or "-"),
        ]
        if style == "short":
            phoneme, groups, classes = (value for _, value in parts)
            return f"{phoneme:<3} {groups} | {classes}"
        return " | ".join(f"{label}: {value}" for label, value in parts)

    # ------------------------------------------------------------------
    # COMPARISON & SCORE
    # ------------------------------------------------------------------
    @staticmethod
    def _flatten(emb_list: List[np.ndarray]) -> np.ndarray:
        if not emb_list:
            return np.zeros(1, dtype=float)
        return np.concatenate([np.ravel(e) for e in emb_list])

    def compare(self, e1: List[np.ndarray], e2: List[np.ndarray]) -> float:
        """
        Cosine similarity between two embedding sequences.
        Length mismatch is handled by truncating both to the min length.
        """
        v1 = self._flatten(e1)
        v2 = self._flatten(e2)

        min_len = min(v1.size, v2.size)
        v1 = v1[:min_len]
        v2 = v2[:min_len]

        denom = float(np.linalg.norm(v1) * np.linalg.norm(v2))
        if denom == 0.0:
            return 0.0
        return float(np.dot(v1, v2) / denom)

    def score(self, e1: List[np.ndarray], e2: List[np.ndarray]) -> float:
        """
        Similarity score in [0, 100].
        """
        return round(self.compare(e1, e2) * 100.0, 2)


__all__ = ["GroupEmbedder"]
