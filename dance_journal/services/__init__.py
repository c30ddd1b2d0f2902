"""
Dance Journal Services

Modules:
- analytics: range resolution, aggregation and trend bucketing
- journal: record creation defaults and snapshot indexing
- coach: text-generation feedback with fixed fallbacks
- llm: LiteLLM client used by the coach
"""
