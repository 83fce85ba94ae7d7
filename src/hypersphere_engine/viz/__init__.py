"""hypersphere_engine.viz"""
