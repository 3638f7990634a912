"""plugdoc - Variant-aware plugin manual generator.

plugdoc renders the documentation page of an audio plugin that ships in
several channel variants (mono and stereo builds). A single authored template
describes every variant; the composer resolves it for one variant at a time.

Core principles:
- Single Source: one template per manual, conditional nodes mark variant content
- Reproducibility: same template and mode produce byte-identical output
- Well-formedness: every variant renders balanced, valid markup
- Explicit Mode: the variant is always passed in, never inferred from globals
"""

__version__ = "0.1.0"
__author__ = "plugdoc Contributors"
