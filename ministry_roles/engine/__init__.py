"""Role profile analysis engine.

Sub-modules:
- classifier         – primary / secondary role, dominance ratio, profile type
- team_distribution  – per-role member counts and score aggregates
- comparison         – pairwise primary-role comparison
- gap_analysis       – team deficits / surpluses against an even spread
- recommendations    – personal guidance per primary role
"""
