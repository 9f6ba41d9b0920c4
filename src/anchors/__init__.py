"""Anchor leak input handling.

The anchors layer turns the four raw operation arguments into a strictly validated
`NormalizedInput`, which the Raffia layer then converts into backend queries.
"""
