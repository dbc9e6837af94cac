"""
Test fixtures for gotagger.

This module provides sample Go source code used across the test suite.
"""

from pathlib import Path

SAMPLE_PROJECT = Path(__file__).parent / "fixtures" / "sample_project"

# Plain functions, no types
SIMPLE_FUNCTIONS = """package main

func add(a, b int) int {
	return a + b
}

func main() {
	println(add(1, 2))
}
"""

# A type, its constructor and its methods
WIDGET = """package widget

type Widget struct {
	name string
}

func NewWidget(name string) *Widget {
	return &Widget{name: name}
}

func (w *Widget) Name() string {
	return w.name
}

func (w Widget) String() string {
	return "widget " + w.name
}
"""

# Constructor declared before its type
CONSTRUCTOR_BEFORE_TYPE = """package widget

func NewWidget() *Widget {
	return &Widget{}
}

type Widget struct{}
"""

# First result group declares several names
NAMED_RESULTS = """package widget

type Widget struct{}

func Pair() (a, b Widget) {
	return
}

func One() (w Widget) {
	return
}

func WithErr() (*Widget, error) {
	return nil, nil
}
"""

# Grouped type declarations and aliases
GROUPED_TYPES = """package shapes

type (
	Point struct{ X, Y int }
	Shape interface{ Area() float64 }
)

type Coord = Point

func Origin() Point {
	return Point{}
}

func NewShape() Shape {
	return nil
}

func AsCoord() *Coord {
	return nil
}
"""

# Qualified and composite result types
COMPOSITE_TYPES = """package store

import "sync"

type Store struct {
	mu sync.Mutex
}

func Lock() *sync.Mutex {
	return nil
}

func All() []Store {
	return nil
}

func Index() map[string]*Store {
	return nil
}

func Watch(done <-chan struct{}, out chan<- int) chan error {
	return nil
}

func Apply(fn func(a, b int) (int, error), vals ...string) [4]byte {
	return [4]byte{}
}
"""

# Method with unnamed receiver and generic receiver
ODD_RECEIVERS = """package list

type List[T any] struct {
	items []T
}

func (l List[T]) Len() int {
	return len(l.items)
}

func (l *List[T]) Push(v T) {
	l.items = append(l.items, v)
}

type Plain struct{}

func (Plain) Kind() string {
	return "plain"
}
"""

# Non-declaration content that must be ignored
MIXED_DECLARATIONS = """package config

import (
	"fmt"
	"os"
)

const Version = "1.0"

var Debug = os.Getenv("DEBUG") != ""

// Load reads the configuration.
func Load() error {
	fmt.Println(Version)
	return nil
}
"""

SYNTAX_ERROR = """package broken

func ok() {}

func broken( {
"""

STATEMENT_AT_TOP_LEVEL = """package broken

x := 1
"""
