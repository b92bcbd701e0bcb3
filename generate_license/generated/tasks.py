"""License tasks, one per bundled template.

Generated by ``generate-license create-tasks``; do not edit by hand.
"""

TASKS = [
    {
        "alias": "license",
        "name": "apache-2.0",
        "description": "Apache License 2.0",
        "deps": ["defaults"],
        "path": "../templates/apache-2.0.tmpl",
        "relative": "apache-2.0.tmpl",
    },
    {
        "alias": "license",
        "name": "bsd-2-clause",
        "description": "BSD 2-Clause \"Simplified\" License",
        "deps": ["defaults"],
        "path": "../templates/bsd-2-clause.tmpl",
        "relative": "bsd-2-clause.tmpl",
    },
    {
        "alias": "license",
        "name": "bsd-3-clause",
        "description": "BSD 3-Clause \"New\" or \"Revised\" License",
        "deps": ["defaults"],
        "path": "../templates/bsd-3-clause.tmpl",
        "relative": "bsd-3-clause.tmpl",
    },
    {
        "alias": "license",
        "name": "0bsd",
        "description": "BSD Zero Clause License",
        "deps": ["defaults"],
        "path": "../templates/0bsd.tmpl",
        "relative": "0bsd.tmpl",
    },
    {
        "alias": "license",
        "name": "bsl-1.0",
        "description": "Boost Software License 1.0",
        "deps": ["defaults"],
        "path": "../templates/bsl-1.0.tmpl",
        "relative": "bsl-1.0.tmpl",
    },
    {
        "alias": "license",
        "name": "wtfpl",
        "description": "Do What The F*ck You Want To Public License",
        "deps": ["defaults"],
        "path": "../templates/wtfpl.tmpl",
        "relative": "wtfpl.tmpl",
    },
    {
        "alias": "license",
        "name": "isc",
        "description": "ISC License",
        "deps": ["defaults"],
        "path": "../templates/isc.tmpl",
        "relative": "isc.tmpl",
    },
    {
        "alias": "license",
        "name": "mit",
        "description": "MIT License",
        "deps": ["defaults"],
        "path": "../templates/mit.tmpl",
        "relative": "mit.tmpl",
    },
    {
        "alias": "license",
        "name": "unlicense",
        "description": "The Unlicense",
        "deps": ["defaults"],
        "path": "../templates/unlicense.tmpl",
        "relative": "unlicense.tmpl",
    },
    {
        "alias": "license",
        "name": "zlib",
        "description": "zlib License",
        "deps": ["defaults"],
        "path": "../templates/zlib.tmpl",
        "relative": "zlib.tmpl",
    },
]
