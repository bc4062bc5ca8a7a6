# coding: utf-8

'''
Data loaded from outside of the code: configuration.
'''
