from .engine import compute_stats, format_stats

__all__ = ['compute_stats', 'format_stats']
