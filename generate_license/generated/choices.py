"""Choices offered by the interactive license picker.

Generated by ``generate-license create-choices``; do not edit by hand.
"""

CHOICES = [
    {"id": "apache-2.0", "name": "Apache License 2.0"},
    {"id": "bsd-2-clause", "name": "BSD 2-Clause \"Simplified\" License"},
    {"id": "bsd-3-clause", "name": "BSD 3-Clause \"New\" or \"Revised\" License"},
    {"id": "0bsd", "name": "BSD Zero Clause License"},
    {"id": "bsl-1.0", "name": "Boost Software License 1.0"},
    {"id": "wtfpl", "name": "Do What The F*ck You Want To Public License"},
    {"id": "isc", "name": "ISC License"},
    {"id": "mit", "name": "MIT License"},
    {"id": "unlicense", "name": "The Unlicense"},
    {"id": "zlib", "name": "zlib License"},
]
