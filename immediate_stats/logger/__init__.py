# coding: utf-8

'''
Logging for Immediate Stats: a thin layer over Python's `logging` with
brace-formatted messages and unit-test log capture.
'''
