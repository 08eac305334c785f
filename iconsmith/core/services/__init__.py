"""
Services — the icon pipeline, one concern per module.

    naming       file name → component identifier
    directories  path state guard, output directory rebuild
    discovery    list *.svg in a directory
    transformers SVG markup → component source
    pipeline     the batch transform
    tools        generator / formatter subprocess stages
"""
