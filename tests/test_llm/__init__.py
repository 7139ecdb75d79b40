"""
Unit tests for the LLM module (src/llm/).

Test suites:
- test_validation: Tests for answer validation by field type and classifier response checks
- test_confidence: Tests for confidence levels and summaries
- test_extraction: Tests for keyword and language-model placeholder classification
- test_client: Tests for Gemini client configuration and initialization
"""
