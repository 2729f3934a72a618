"""
urlspell - Statistical URL/hostname corrector

Learns how often each site appears in free text, then maps an unseen
hostname to the most frequent known one within two edits.
Based on Peter Norvig's approach (https://norvig.com/spell-correct.html).

Modules:
- config: pydantic settings (alphabet, site pattern, workers, model path)
- extract: pulls site tokens out of raw text
- edits: edit-distance-1 neighbourhood generator
- corrector: frequency table + tiered correction
- sources: file / HTTP training text loaders
- cli: command line (train, correct)
"""
from .corrector import URLCorrector
from .edits import EditGenerator, edits
from .extract import extract_sites

__version__ = "1.0.0"

__all__ = ["URLCorrector", "EditGenerator", "edits", "extract_sites"]
