"""服务层"""

from .template_message import TemplateMessageService

__all__ = ["TemplateMessageService"]
