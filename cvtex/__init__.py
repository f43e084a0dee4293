"""
CVTeX - structured CV data to typeset LaTeX documents

Turns a CV record (personal fields plus experience, education, certification,
project, activity and language collections) into a complete LaTeX document
for one of several whole-document layouts.

Architecture:
- Templating Context: sanitization, field formatting, section building and
  layout dispatch (cvtex.contexts.templating)
- Utils: logging and text helpers shared across contexts
"""

__version__ = "0.1.0"
