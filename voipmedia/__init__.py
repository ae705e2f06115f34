"""RTP, SDP, G.711 and DTMF building blocks for VoIP media sessions."""

__version__ = "0.1.0"
__all__ = ["awgn", "g711", "dtmf", "rtp", "codec", "media", "origin", "session", "sdp"]