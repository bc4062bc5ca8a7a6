# coding: utf-8

'''
Base-level stuff everything else can import: exceptions and numbers.
'''
