from typing import Dict, Sequence

RULE = "━" * 60

INSIGHTS = [
    '"system" - Sets instructions/personality (highest priority)',
    '"user" - Your messages to the AI',
    '"assistant" - AI\'s previous responses (for context)',
    '"tool" - Results from function/tool execution (advanced)',
]

def format_messages(messages: Sequence[Dict[str, str]]) -> str:
    lines = ["📝 Message roles in conversation:"]
    for i, msg in enumerate(messages, 1):
        lines.append(f"{i}. [{msg['role'].upper()}]: {msg['content'][:60]}...")
    return "\n".join(lines)

def format_response(text: str) -> str:
    return "\n".join([RULE, "✅ Response with role-based behavior:\n", text, RULE])

def format_insights() -> str:
    lines = ["\n💡 Key insights about roles:"]
    for s in INSIGHTS:
        lines.append(f"   • {s}")
    lines.append("   ⚠️  You cannot use custom roles - only these 4 are supported!")
    return "\n".join(lines)
