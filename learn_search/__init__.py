"""
learn-search - weighted keyword search over a modular documentation corpus.

Modules (directories with an index.yml descriptor) own units (Markdown
pages). Topics group weighted regular-expression keywords; every unit is
scanned line by line and modules are ranked per topic by

    score(M) = Σ hits(keyword, M) × weight(keyword)
"""

__version__ = "0.1.0"
