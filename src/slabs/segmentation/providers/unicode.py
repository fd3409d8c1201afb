"""Sentence segmentation following Unicode Standard Annex #29."""

from uniseg.sentencebreak import sentences

from ..base import BaseSegmenter, SentenceSpan


class UnicodeSentenceSegmenter(BaseSegmenter):
    """Segments text with the UAX #29 sentence boundary rules.

    The rules keep abbreviations followed by a lowercase word or a number
    together ("D.C. on", "Jan. 15th"), as well as decimals and ellipses, so
    "Dr. Smith went to Washington D.C. on Jan. 15th." yields at most two
    sentences rather than four.
    """

    def segment(self, text: str) -> list[SentenceSpan]:
        spans = []
        offset = 0
        for sentence in sentences(text):
            length = len(sentence.encode("utf-8"))
            spans.append(SentenceSpan(offset, offset + length, sentence))
            offset += length
        return spans
