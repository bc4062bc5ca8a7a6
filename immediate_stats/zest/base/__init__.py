# coding: utf-8

'''
Base classes for Immediate Stats tests.
'''
