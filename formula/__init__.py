"""Formula module - tree factory facade and rendering trees"""
from .tree_factory import FormulaTreeFactory
from .composite import Composite, AtomicComposite, CompositeComposite, CompositeFactory

__all__ = ['FormulaTreeFactory', 'Composite', 'AtomicComposite', 'CompositeComposite', 'CompositeFactory']
