"""Tkinter front end for the keypad calculator"""
