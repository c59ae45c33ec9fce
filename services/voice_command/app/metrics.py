from prometheus_client import Counter, Histogram, Gauge

# Voice command service metrics
voice_commands_total = Counter('voice_commands_total', 'Total voice commands processed', ['intent', 'tier'])
voice_command_duration_seconds = Histogram('voice_command_duration_seconds', 'Voice command processing duration')
voice_synthesis_failures_total = Counter('voice_synthesis_failures_total', 'Speech synthesis calls that failed')
voice_capture_errors_total = Counter('voice_capture_errors_total', 'Speech capture errors reported', ['code'])
voice_active_sessions = Gauge('voice_active_sessions', 'Number of active command sessions')

def record_command(intent: str, tier: str, duration: float):
    """Record voice command metrics"""
    voice_commands_total.labels(intent=intent, tier=tier).inc()
    voice_command_duration_seconds.observe(duration)

def record_synthesis_failure():
    """Record a failed speech synthesis call"""
    voice_synthesis_failures_total.inc()

def record_capture_error(code: str):
    """Record a speech capture error"""
    voice_capture_errors_total.labels(code=code).inc()
