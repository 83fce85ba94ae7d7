"""hypersphere_engine.invariants"""
