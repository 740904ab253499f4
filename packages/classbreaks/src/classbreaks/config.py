"""
Classbreaks Configuration
=========================
All thresholds, name tables and numeric defaults for break computation.
Single source of truth. Every module reads from here.

Usage:
    from classbreaks.config import CONFIG
    bias = CONFIG['quantiles']['rounding_bias']
"""

CONFIG = {

    # =================================================================
    # Input validation
    # =================================================================
    'sample': {
        'min_size': 2,
    },

    'class_count': {
        'min': 2,
    },

    # =================================================================
    # Quantiles
    # =================================================================
    'quantiles': {
        # floor(i * n/k + bias) - 1, kept at 0.49 for numeric compatibility
        'rounding_bias': 0.49,
    },

    # =================================================================
    # Kurtosis needs n - 2 and n - 3 to be non-zero
    # =================================================================
    'kurtosis': {
        'min_size': 4,
    },

    # =================================================================
    # Floating point width
    # =================================================================
    'numeric': {
        'default_dtype': 'float64',
        'dtypes': ('float32', 'float64'),
    },

    # =================================================================
    # Method names (exact, case-sensitive)
    # =================================================================
    'methods': {
        'names': {
            'EqualInterval': 'EqualInterval',
            'EqualInverval': 'EqualInterval',    # historical spelling
            'HeadTail': 'HeadTail',
            'TailHead': 'TailHead',
            'JenksNaturalBreaks': 'JenksNaturalBreaks',
            'Quantiles': 'Quantiles',
            'Arithmetic': 'Arithmetic',
        },
        # class count is computed from the data, the request is ignored
        'data_determined': ('HeadTail', 'TailHead'),
    },
}


def get(path: str, default=None):
    """
    Get a config value by dot-separated path.

    Usage:
        get('quantiles.rounding_bias')   → 0.49
        get('sample.min_size')           → 2
    """
    keys = path.split('.')
    val = CONFIG
    for key in keys:
        if isinstance(val, dict) and key in val:
            val = val[key]
        else:
            return default
    return val
