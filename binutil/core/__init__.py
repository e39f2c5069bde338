"""Registry and pipeline composition engine.

WHY: The core package is the stable heart of binutil — name resolution
and the rules for threading data between codecs. Codec families and the
CLI both depend on it; it depends on nothing but the codec contract.

HOW: registry.py resolves names to codec factories, pipeline.py chains
codecs, multi.py groups independent single-step pipelines.

RULES:
- The core never logs and never prints; failures are raised
- Pipelines are immutable once constructed
"""
