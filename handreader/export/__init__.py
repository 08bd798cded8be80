from .writer import hands_to_document, read_hands, write_hands

__all__ = ['hands_to_document', 'read_hands', 'write_hands']
