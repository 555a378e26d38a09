"""HTTP API for WorkBoard"""
