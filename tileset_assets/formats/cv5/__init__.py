"""CV5 (megatile reference) format."""
from .parser import Cv5Parser, decode_cv5
from .entry import Cv5Group

__all__ = ['Cv5Parser', 'Cv5Group', 'decode_cv5']
