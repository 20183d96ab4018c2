"""Implementation modules for ``jobhunter_providers.base.cancellation``."""
