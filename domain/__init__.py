"""Compares recipes by the ratios between their ingredients.

A large language model does all of the reading: it splits free text into
recipes and ingredients, suggests ratios worth comparing, and decides which
ingredients sit on each side of a ratio. It never does the arithmetic. Masses
come from unit expressions it writes, evaluated with pint, and ratios are summed
and divided here.

The model sits behind `aopenai.StructuredCompletion` so it can be faked.
"""
