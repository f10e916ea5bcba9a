"""Fixed scoreboard snapshot served whenever the ESPN feed cannot be reached."""

MOCK_SCOREBOARD = {
    "events": [
        {
            "id": "401580051",
            "name": "Masters Tournament",
            "date": "2023-04-09T00:00Z",
            "competitions": [
                {
                    "competitors": [
                        {
                            "id": "1",
                            "athlete": {"displayName": "Scottie Scheffler"},
                            "score": "-7",
                            "status": {"type": {"shortDetail": "F"}, "thru": 18},
                            "linescores": [{"value": -3, "teeTime": "10:00 AM"}],
                        },
                        {
                            "id": "2",
                            "athlete": {"displayName": "Bryson DeChambeau"},
                            "score": "-6",
                            "status": {"type": {"shortDetail": "F"}, "thru": 18},
                            "linescores": [{"value": -2, "teeTime": "10:10 AM"}],
                        },
                        {
                            "id": "3",
                            "athlete": {"displayName": "Collin Morikawa"},
                            "score": "-5",
                            "status": {"type": {"shortDetail": "F"}, "thru": 18},
                            "linescores": [{"value": -1, "teeTime": "10:20 AM"}],
                        },
                        {
                            "id": "4",
                            "athlete": {"displayName": "Xander Schauffele"},
                            "score": "-4",
                            "status": {"type": {"shortDetail": "F"}, "thru": 18},
                            "linescores": [{"value": -2, "teeTime": "10:30 AM"}],
                        },
                        {
                            "id": "5",
                            "athlete": {"displayName": "Brooks Koepka"},
                            "score": "-3",
                            "status": {"type": {"shortDetail": "F"}, "thru": 18},
                            "linescores": [{"value": -1, "teeTime": "10:40 AM"}],
                        },
                        {
                            "id": "6",
                            "athlete": {"displayName": "Rory McIlroy"},
                            "score": "-2",
                            "status": {"type": {"shortDetail": "F"}, "thru": 18},
                            "linescores": [{"value": 0, "teeTime": "10:50 AM"}],
                        },
                        {
                            "id": "7",
                            "athlete": {"displayName": "Will Zalatoris"},
                            "score": "-1",
                            "status": {"type": {"shortDetail": "F"}, "thru": 18},
                            "linescores": [{"value": -1, "teeTime": "11:00 AM"}],
                        },
                        {
                            "id": "8",
                            "athlete": {"displayName": "Wyndham Clark"},
                            "score": "E",
                            "status": {"type": {"shortDetail": "F"}, "thru": 18},
                            "linescores": [{"value": 0, "teeTime": "11:10 AM"}],
                        },
                        {
                            "id": "9",
                            "athlete": {"displayName": "Akshay Bhatia"},
                            "score": "+1",
                            "status": {"type": {"shortDetail": "F"}, "thru": 18},
                            "linescores": [{"value": 1, "teeTime": "11:20 AM"}],
                        },
                    ],
                },
            ],
        },
    ],
}
