"""
LLM response utilities for handling multi-format model outputs.

Supports both:
- Simple string responses (gpt-4o-mini, gpt-4, etc.)
- Structured content blocks with reasoning (o1-style models)
"""

from typing import Any
from loguru import logger


def extract_text_from_response(response: Any) -> str:
    """
    Extract text content from LLM response (handles all formats).

    Supports:
    - Simple string: "text here"
    - Structured blocks: [{'type': 'reasoning', ...}, {'type': 'text', 'text': '...'}]
    - LangChain AIMessage with content attribute

    Reasoning blocks are never part of the returned text.

    Args:
        response: LLM response (AIMessage, str, list, or None)

    Returns:
        Extracted text content as string ("" when nothing usable was generated)
    """
    # Extract content attribute if it exists (LangChain AIMessage)
    content = response.content if hasattr(response, "content") else response

    if not content:
        return ""

    if isinstance(content, str):
        return content

    if isinstance(content, list):
        text_parts = []
        for block in content:
            if isinstance(block, dict):
                if block.get("type") == "text" and "text" in block:
                    text_parts.append(block["text"])
                # Fallback: any dict with 'text' key
                elif "text" in block and block.get("type") != "reasoning":
                    text_parts.append(block["text"])
            elif isinstance(block, str):
                text_parts.append(block)

        result = "".join(text_parts)
        if result:
            return result

        logger.warning(f"No text blocks found in structured response: {str(content)[:200]}")
        return ""

    # Fallback: convert to string
    return str(content)
