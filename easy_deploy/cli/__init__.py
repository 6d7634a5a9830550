"""Command line interface for easy-deploy"""
