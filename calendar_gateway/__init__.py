"""HTTP gateway that forwards event mutations to Google Calendar."""
