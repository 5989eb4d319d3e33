"""
Implementation of penntok. The public interface is the penntok package.
"""
