from __future__ import annotations

from testcase_generator.schemas.testcase import ChatCompletionPayload, ChatMessage

MAX_TOKENS = 2000
TEMPERATURE = 0.7

TEST_CASE_START_MARKER = "=== TEST CASE [ID] ==="
TEST_CASE_END_MARKER = "=== END TEST CASE ==="

USER_PROMPT_PREFIX = "Generate detailed test cases for the following requirement: "

SYSTEM_PROMPT = f"""
You are an expert software test engineer with over 10 years of experience. Generate comprehensive, well-structured test cases based on the given requirements or user stories. Include positive test cases, negative test cases, edge cases, and boundary value testing scenarios.

Format EACH test case as a separate, clearly defined block using the following structure:

{TEST_CASE_START_MARKER}
Title: [Brief descriptive title]
Description: [Detailed description]
Preconditions: [Required setup/conditions]
Test Steps:
1. [Step 1]
2. [Step 2]
3. [Step 3]
Expected Results: [What should happen]
Priority: [High/Medium/Low]
Category: [Functional/Security/Performance/UI/etc.]

{TEST_CASE_END_MARKER}

Make sure each test case is clearly separated and covers different scenarios including security, performance, and usability aspects where relevant.
""".strip()


def build_user_message(prompt: str) -> str:
    return f"{USER_PROMPT_PREFIX}{prompt}"


def build_chat_payload(prompt: str, *, model: str) -> ChatCompletionPayload:
    """
    Build the chat-completion request for a requirement prompt.

    The prompt is embedded verbatim; no trimming or validation is applied.
    """
    return ChatCompletionPayload(
        model=model,
        max_tokens=MAX_TOKENS,
        temperature=TEMPERATURE,
        messages=[
            ChatMessage(role="system", content=SYSTEM_PROMPT),
            ChatMessage(role="user", content=build_user_message(prompt)),
        ],
    )
