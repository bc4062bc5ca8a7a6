# coding: utf-8

'''
Game engine integration.
'''
