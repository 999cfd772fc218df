"""
Portify - Portfolio builder template engine

Turns author-supplied HTML/CSS/JS templates and a user's portfolio data into a
publishable personal site.

Architecture:
- Customization Context: Marker substitution, loop expansion, page assembly
- Publishing Context: Writing assembled pages per subdomain with event tracking
"""

__version__ = "0.1.0"
