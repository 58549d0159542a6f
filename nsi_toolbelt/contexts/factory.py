from nsi_toolbelt.configs import ContextConfig, ContextType

from .base import BaseContext
from .memory import MemoryContext

# Registry to map context type to concrete class
_CONTEXT_TYPE_REGISTRY: dict[ContextType, type] = {
    ContextType.MEMORY: MemoryContext,
}


class ContextFactory:
    @staticmethod
    def create_context(config: ContextConfig) -> BaseContext:
        """Create a scene context based on the specified type.

        Args:
            config: Context configuration.
        Returns:
            An instance of the specified context.
        """
        context_type = config.type
        if context_type not in _CONTEXT_TYPE_REGISTRY:
            raise ValueError(f"Unsupported context type: {context_type}")
        context_class = _CONTEXT_TYPE_REGISTRY[context_type]
        return context_class(verbose=config.verbose)
