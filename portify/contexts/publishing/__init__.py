"""
Publishing Context

Responsibilities:
- Assembles the customized page for a portfolio
- Writes it under the publish root, one directory per subdomain
- Records publish events in the pipeline event log

Owns: Published site layout
Never: Modifies template content
"""

from portify.contexts.publishing.publisher import PublishResult, publish_portfolio

__all__ = ["PublishResult", "publish_portfolio"]
