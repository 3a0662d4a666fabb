"""
Service layer - request pipelines
"""

from coach.services.chat_pipeline import ChatPipeline, read_json_body

__all__ = ["ChatPipeline", "read_json_body"]
