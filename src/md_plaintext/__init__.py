"""md_plaintext

Markdown to plain-text transcoder for places that cannot render markup
(clipboard targets, plain-text panes, notification bodies).

Public API surface:
- md_plaintext.transcode : the conversion itself
- md_plaintext.pipeline.transcode.trace : per-stage diagnostics
- md_plaintext.stages.registry : ordered stage registry
- md_plaintext.pipeline.build.build_local : batch conversion from a YAML config
- md_plaintext.cli.main : CLI entrypoint
"""
from .pipeline.transcode import transcode

__all__ = ["__version__", "transcode"]
__version__ = "0.1.0"
