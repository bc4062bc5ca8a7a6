# coding: utf-8

'''
Unit testing helpers for Immediate Stats.
'''
