from seteuk.text.byte_length import TextStats, char_count, measure, neis_byte_length

__all__ = ["TextStats", "char_count", "measure", "neis_byte_length"]
