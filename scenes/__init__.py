"""scenes — pygame screens.

level_select  — pick an unlocked level
game_scene    — play one level (game_draw holds its drawing helpers)
"""
