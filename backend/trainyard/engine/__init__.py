"""Training yard engine components.

Key components (import directly from submodules):
- ConnectionGraph: Read-only location connections (graph.py)
- ActionGraphResolver: Rebuilds navigation for a location (resolver.py)
- EncounterSelector / MasterTable: Master per level bracket (masters.py)
- EncounterGate: Eligibility state machine (gate.py)
- EncounterOutcomeHandler: Reconciles finished fights (outcome.py)
- TrainingGround: Scene controller tying the above together (training.py)
- WorldLoader / WorldValidator: YAML world loading and checks (world.py, validator.py)
"""

# Note: No eager imports to avoid circular import issues
