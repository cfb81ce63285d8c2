"""
eventfold – event-sourcing demo: commands become events, projections fold them.

Import path convention::

    from eventfold.kernel.errors import ValidationError
    from eventfold.application.cqrs import CommandHandler, CommandRegistry
    from eventfold.application.event_sourcing import Fold, Projection
    from eventfold.bootstrap import build_services
    from eventfold.adapters.fastapi import create_app
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
