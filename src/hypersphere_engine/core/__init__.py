"""hypersphere_engine.core"""
