"""Desktop front end over a machine-learning toolkit.

The :class:`mlgui.gui.GUI` aggregator is the composition root: it owns the
SVM, HMM, kernel, observation, preprocessing and feature controllers.
"""
