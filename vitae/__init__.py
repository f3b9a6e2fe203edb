"""
vitae - static resume generator

Renders structured resume data and a set of visual themes into a single
self-contained HTML page.

Architecture:
- Loading Context: Resume data and theme ingestion, default theme selection
- Templating Context: Jinja2 rendering with template helper predicates
- Rendering Context: CSS processing, inlining and output management
- Deployment Context: Staging the build directory and remote-copy reporting
"""

__version__ = "0.1.0"
