"""
nlu_features.log
================

Daily-file and console logging shared by the models and payload helpers.
"""
