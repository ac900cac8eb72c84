"""
WebSocket Package

Contains the Socket.IO event handlers.
"""
