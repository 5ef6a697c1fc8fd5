"""Aliyun Function Compute platform support."""
