"""
Game Module - level flow, state machine, terminal I/O
"""
