"""Domain layer per il diario alimentare.

Entità, value object e regole di aggregazione dei nutrienti, disaccoppiate
da HTTP e dalla persistenza.
"""
