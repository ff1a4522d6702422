from unittest import TestCase

from victoria_gtfs.classifier import HeadsignClassifier, strip_route_prefix
from victoria_gtfs.directions import ClassifiedHeadsign, Direction, DirectionRule
from victoria_gtfs.errors import UnexpectedHeadsign


# (route, direction_id, raw headsign, direction, cleaned headsign)
KNOWN_HEADSIGNS = [
    ("1", 0, "Downtown", Direction.WEST, "Downtown"),
    ("1", 1, "South Oak Bay via Richardson", Direction.EAST, "South Oak Bay"),
    ("2", 0, "James Bay - Fisherman's Wharf", Direction.WEST, "James Bay"),
    ("2", 1, "Willows - Oak Bay Village", Direction.EAST, "Willows"),
    ("3", 0, "Downtown Only", Direction.CLOCKWISE, "Downtown"),
    ("3", 1, "Royal Jubilee - Cook St Village", Direction.COUNTERCLOCKWISE, "Royal Jubilee"),
    ("4", 0, "To Gorge & Douglas", Direction.WEST, "Gorge & Douglas"),
    ("4", 1, "UVic Via Hillside", Direction.EAST, "UVic"),
    ("6", 0, "6A Royal Oak Exch Via Emily Carr", Direction.NORTH, "A Royal Oak Exch"),
    ("6", 1, "6B Downtown Via Chatterton", Direction.SOUTH, "B Downtown"),
    ("7", 0, "7N Downtown - To 21 Interurban", Direction.CLOCKWISE, "N Downtown"),
    ("7", 1, "UVic Via Fairfield", Direction.COUNTERCLOCKWISE, "UVic"),
    ("8", 0, "Tillicum Mall Via Finalyson", Direction.WEST, "Tillicum Mall"),
    ("8", 1, "To Richmond & Oak Bay Ave Only", Direction.EAST, "Richmond & Oak Bay Ave"),
    ("9", 0, "Royal Oak Exch - Hillside/Gorge", Direction.WEST, "Royal Oak Exch"),
    ("9", 1, "UVic - Gorge/Hillside", Direction.EAST, "UVic"),
    ("10", 0, "Royal Jubilee Via Vic West", Direction.CLOCKWISE, "Royal Jubilee"),
    ("10", 1, "James Bay - To 3 R. Jubilee", Direction.COUNTERCLOCKWISE, "James Bay"),
    ("11", 0, "Tillicum Mall Via Gorge", Direction.WEST, "Tillicum Mall"),
    ("11", 1, "UVic Via Uplands", Direction.EAST, "UVic"),
    ("12", 0, "University Hgts Via Kenmore", Direction.WEST, "University Hts"),
    ("12", 1, "UVic Via Kenmore", Direction.EAST, "UVic"),
    ("13", 0, "UVic", Direction.WEST, "UVic"),
    ("13", 1, "Ten Mile Point", Direction.EAST, "Ten Mile Point"),
    ("14", 0, "Vic General Via Craigflower", Direction.WEST, "Vic General"),
    ("14", 1, "UVic Via Richmond", Direction.EAST, "UVic"),
    ("15", 0, "Esquimalt - Fort/Yates Exp", Direction.WEST, "Esquimalt"),
    ("15", 1, "UVic - Foul Bay Exp", Direction.EAST, "UVic"),
    ("16", 0, "Uptown - McKenzie Exp", Direction.WEST, "Uptown"),
    ("16", 1, "UVic - McKenzie Exp", Direction.EAST, "UVic"),
    ("17", 0, "Downtown Via Quadra", Direction.WEST, "Downtown"),
    ("17", 1, "UVic Via Cedar Hill Sch", Direction.EAST, "UVic"),
    ("21", 0, "N Camosun Via Burnside", Direction.CLOCKWISE, "N Camosun"),
    ("21", 1, "Downtown To 7 UVic", Direction.COUNTERCLOCKWISE, "7 UVic"),
    ("22", 0, "A Vic General Via Straw Vale", Direction.NORTH, "A Vic General"),
    ("22", 1, "Hillside Mall Via Fernwood", Direction.SOUTH, "Hillside Mall"),
    ("24", 0, "Admirals Walk Via Colville", Direction.WEST, "Admirals Walk"),
    ("24", 1, "Cedar Hill Via Parklands", Direction.EAST, "Cedar Hill"),
    ("25", 0, "Shoreline Sch Via Munro", Direction.WEST, "Shoreline Sch"),
    ("25", 1, "Maplewood", Direction.EAST, "Maplewood"),
    ("26", 0, "Dockyard Via McKenzie", Direction.WEST, "Dockyard"),
    ("26", 1, "UVic Via McKenzie", Direction.EAST, "UVic"),
    ("27", 0, "Gordon Head Via Shelbourne", Direction.NORTH, "Gordon Head"),
    ("27", 1, "27X Express To Downtown", Direction.SOUTH, "Downtown"),
    ("28", 0, "28X Express To Majestic", Direction.NORTH, "Majestic"),
    ("28", 1, "To McKenzie Only", Direction.SOUTH, "McKenzie"),
    ("30", 1, "Royal Oak Exch Via Carey", Direction.NORTH, "Royal Oak Exch"),
    ("30", 1, "Downtown", Direction.SOUTH, "Downtown"),
    ("31", 0, "Royal Oak Exch To 75 Saanichton", Direction.NORTH, "75 Saanichton"),
    ("31", 1, "To Gorge Only", Direction.SOUTH, "Gorge"),
    ("32", 0, "Cordova Bay", Direction.NORTH, "Cordova Bay"),
    ("32", 1, "Royal Oak Exch", Direction.SOUTH, "Royal Oak Exch"),
    ("35", 0, "Ridge", Direction.CLOCKWISE, "Ridge"),
    ("39", 0, "Westhills Exch", Direction.WEST, "Westhills Exch"),
    ("39", 1, "UVic Via Royal Oak", Direction.EAST, "UVic"),
    ("43", 0, "Belmont Park - Royal Roads", Direction.CLOCKWISE, "Belmont Pk"),
    ("46", 0, "Westhills Exch", Direction.WEST, "Westhills Exch"),
    ("46", 1, "Dockyard", Direction.EAST, "Dockyard"),
    ("47", 0, "Goldstream Mdws Via Thetis Hgts", Direction.WEST, "Goldstream Mdws"),
    ("47", 1, "Downtown", Direction.EAST, "Downtown"),
    ("48", 0, "HAPPY VALLEY VIA COLWOOD", Direction.WEST, "Happy Vly"),
    ("48", 1, "Downtown", Direction.EAST, "Downtown"),
    ("50", 0, "Langford To 61 Sooke", Direction.WEST, "61 Sooke"),
    ("50", 1, "Downtown", Direction.EAST, "Downtown"),
    ("51", 0, "Langford - McKenzie Exp", Direction.WEST, "Langford"),
    ("51", 1, "UVic - McKenzie Exp", Direction.EAST, "UVic"),
    ("52", 0, "Bear Mountain - Lagoon/Royal Bay", Direction.WEST, "Bear Mtn"),
    ("52", 1, "Colwood Exch Via Royal Bay/Lagoon", Direction.EAST, "Colwood Exch"),
    ("53", 0, "Colwood Exch Via Atkins - Thetis Lk", Direction.CLOCKWISE, "Colwood Exch"),
    ("53", 1, "Langford Exch Via Atkins", Direction.COUNTERCLOCKWISE, "Langford Exch"),
    ("54", 0, "Metchosin", Direction.CLOCKWISE, "Metchosin"),
    ("55", 1, "Happy Valley To Colwood Exch", Direction.COUNTERCLOCKWISE, "Colwood Exch"),
    ("56", 0, "Thetis Heights Via Florence Lake", Direction.NORTH, "Thetis Hts"),
    ("56", 1, "Langford Exch", Direction.SOUTH, "Langford Exch"),
    ("57", 0, "Theits Heights Via Millstream", Direction.NORTH, "Theits Hts"),
    ("57", 1, "Langford Exch", Direction.SOUTH, "Langford Exch"),
    ("58", 1, "Goldstream Mdws", Direction.OUTBOUND, "Goldstream Mdws"),
    ("59", 1, "Triangle Mtn Via Royal Bay", Direction.COUNTERCLOCKWISE, "Triangle Mtn"),
    ("60", 0, "Wishart Via Royal Bay", Direction.CLOCKWISE, "Wishart"),
    ("61", 0, "Sooke", Direction.WEST, "Sooke"),
    ("61", 1, "Langford Exch To 50 Downtown", Direction.EAST, "50 Downtown"),
    ("63", 0, "Otter Point", Direction.WEST, "Otter Point"),
    ("64", 0, "East Sooke To 17 Mile House", Direction.CLOCKWISE, "17 Mile House"),
    ("64", 1, "East Sooke", Direction.COUNTERCLOCKWISE, "East Sooke"),
    ("65", 0, "Sooke Via Westhills", Direction.WEST, "Sooke"),
    ("65", 1, "Downtown Via Westhills", Direction.EAST, "Downtown"),
    ("70", 0, "Swartz Bay Ferry Via Hwy #17", Direction.NORTH, "Swartz Bay Ferry"),
    ("70", 1, "To Gorge Only Via Hwy #17", Direction.SOUTH, "Gorge"),
    ("71", 0, "Swartz Bay Ferry Via West Sidney", Direction.NORTH, "Swartz Bay Ferry"),
    ("71", 1, "Downtown", Direction.SOUTH, "Downtown"),
    ("72", 0, "McDonald Park Via Saanichton", Direction.NORTH, "McDonald Pk"),
    ("72", 1, "McTavish Exch", Direction.SOUTH, "McTavish Exch"),
    ("75", 0, "To Keating Only", Direction.NORTH, "Keating"),
    ("75", 1, "Royal Oak Exch To 30 Downtown", Direction.SOUTH, "30 Downtown"),
    ("76", 0, "Swartz Bay Ferry Non-Stop", Direction.NORTH, "Swartz Bay Ferry"),
    ("76", 1, "UVic - Via Express", Direction.SOUTH, "UVic"),
    ("81", 0, "To Sidney Only", Direction.NORTH, "Sidney"),
    ("81", 1, "Brentwood To Verdier Only", Direction.SOUTH, "Verdier"),
    ("82", 0, "Sidney Via Stautw", Direction.NORTH, "Sidney"),
    ("82", 1, "To Brentwood Via Stautw", Direction.SOUTH, "Brentwood"),
    ("83", 0, "Sidney Via West Saanich", Direction.NORTH, "Sidney"),
    ("83", 1, "Royal Oak Exch Via West Saanich", Direction.SOUTH, "Royal Oak Exch"),
    ("85", 0, "North Saanich", Direction.CLOCKWISE, "North Saanich"),
    ("85", 1, "North Saanich", Direction.CLOCKWISE, "North Saanich"),
    ("87", 0, "Sidney", Direction.NORTH, "Sidney"),
    ("87", 1, "Dean Park Via Airport To Saanichton", Direction.SOUTH, "Saanichton"),
    ("88", 0, "Sidney", Direction.NORTH, "Sidney"),
    ("88", 1, "Airport", Direction.SOUTH, "Airport"),
]


class TestStripRoutePrefix(TestCase):
    def test(self) -> None:
        self.assertEqual(strip_route_prefix("27 Downtown Only", "27"), "Downtown Only")
        self.assertEqual(
            strip_route_prefix("6B Downtown Via Chatterton", "6"),
            "B Downtown Via Chatterton",
        )

    def test_no_prefix(self) -> None:
        self.assertEqual(strip_route_prefix("Downtown", "27"), "Downtown")
        self.assertEqual(strip_route_prefix("Downtown", ""), "Downtown")

    def test_only_at_start(self) -> None:
        headsign = "Royal Oak Exch To 75 Saanichton"
        self.assertEqual(strip_route_prefix(headsign, "75"), headsign)


class TestHeadsignClassifier(TestCase):
    classifier = HeadsignClassifier.from_file()

    def test(self) -> None:
        self.assertEqual(
            self.classifier.classify("27", 1, "27 Downtown Only"),
            ClassifiedHeadsign(Direction.SOUTH, "Downtown"),
        )
        self.assertEqual(
            self.classifier.classify("27", 0, "27 Gordon Head Via Shelbourne"),
            ClassifiedHeadsign(Direction.NORTH, "Gordon Head"),
        )

    def test_same_headsign_both_directions(self) -> None:
        self.assertEqual(
            self.classifier.classify("2", 0, "2 James Bay - Fisherman's Wharf"),
            ClassifiedHeadsign(Direction.WEST, "James Bay"),
        )
        self.assertEqual(
            self.classifier.classify("2", 1, "2 James Bay - Fisherman's Wharf"),
            ClassifiedHeadsign(Direction.EAST, "James Bay"),
        )

    def test_any_direction_id(self) -> None:
        for direction_id in (0, 1, None):
            with self.subTest(direction_id=direction_id):
                self.assertEqual(
                    self.classifier.classify("30", direction_id, "30 Downtown"),
                    ClassifiedHeadsign(Direction.SOUTH, "Downtown"),
                )
                self.assertEqual(
                    self.classifier.classify("85", direction_id, "85 North Saanich"),
                    ClassifiedHeadsign(Direction.CLOCKWISE, "North Saanich"),
                )

    def test_known_headsigns(self) -> None:
        for route, direction_id, raw, direction, headsign in KNOWN_HEADSIGNS:
            with self.subTest(route=route, direction_id=direction_id, raw=raw):
                self.assertEqual(
                    self.classifier.classify(route, direction_id, raw),
                    ClassifiedHeadsign(direction, headsign),
                )

    def test_known_headsigns_cover_all_routes(self) -> None:
        self.assertSetEqual({i[0] for i in KNOWN_HEADSIGNS}, set(self.classifier.rules))

    def test_all_known_headsigns(self) -> None:
        for route, rules in self.classifier.rules.items():
            for rule in rules:
                direction_ids = (0, 1) if rule.direction_id is None else (rule.direction_id,)
                for direction_id in direction_ids:
                    for headsign in rule.headsigns:
                        # An earlier rule may claim the same headsign
                        expected = next(
                            i.direction for i in rules if i.matches(direction_id, headsign)
                        )
                        with self.subTest(route=route, direction_id=direction_id, h=headsign):
                            self.assertIs(
                                self.classifier.classify(
                                    route, direction_id, f"{route} {headsign}"
                                ).direction,
                                expected,
                            )
                            self.assertIs(
                                self.classifier.classify(route, direction_id, headsign).direction,
                                expected,
                            )

    def test_unexpected_headsign(self) -> None:
        with self.assertRaises(UnexpectedHeadsign) as ctx:
            self.classifier.classify("27", 1, "27 Mars Via Phobos")
        self.assertEqual(ctx.exception.route_short_name, "27")
        self.assertEqual(ctx.exception.direction_id, 1)
        self.assertEqual(ctx.exception.headsign, "27 Mars Via Phobos")

    def test_unexpected_direction_id(self) -> None:
        with self.assertRaises(UnexpectedHeadsign):
            self.classifier.classify("27", 0, "27 Downtown Only")

    def test_unknown_route(self) -> None:
        with self.assertRaises(UnexpectedHeadsign):
            self.classifier.classify("999", 0, "Downtown")

    def test_custom_rules(self) -> None:
        classifier = HeadsignClassifier(
            {"1": [DirectionRule(None, Direction.INBOUND, ("Downtown Only",))]},
        )
        self.assertEqual(
            classifier.classify("1", None, "1 Downtown Only"),
            ClassifiedHeadsign(Direction.INBOUND, "Downtown"),
        )
